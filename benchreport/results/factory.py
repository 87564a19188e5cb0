"""Factory for creating summary formats by format type."""

from typing import ClassVar, TextIO

from benchreport.models.constants import ResultFormatType
from benchreport.results.base import ResultFormat, UnknownResultFormatError
from benchreport.results.csv_format import CSVResultFormat, SCSVResultFormat
from benchreport.results.structured import JSONResultFormat, YAMLResultFormat
from benchreport.results.text import TextResultFormat
from benchreport.utils.logger import Logger, LogLevel


class ResultFormatFactory:
    """Maps each ResultFormatType to its formatter class."""

    FORMATS: ClassVar[dict[ResultFormatType, type[ResultFormat]]] = {
        ResultFormatType.TEXT: TextResultFormat,
        ResultFormatType.CSV: CSVResultFormat,
        ResultFormatType.SCSV: SCSVResultFormat,
        ResultFormatType.JSON: JSONResultFormat,
        ResultFormatType.YAML: YAMLResultFormat,
    }

    @classmethod
    def get_instance(cls, format_type: ResultFormatType, out: TextIO) -> ResultFormat:
        """Create the formatter for a format type.

        Args:
            format_type: Summary format to produce.
            out: Stream the summary is written to.

        Returns:
            A ResultFormat bound to out.

        Raises:
            UnknownResultFormatError: If no formatter is registered.
        """
        format_cls = cls.FORMATS.get(format_type)
        if format_cls is None:
            raise UnknownResultFormatError(format_type)
        Logger.log_if_configured(
            "results", LogLevel.DEBUG, f"Using {format_cls.__name__} for summary"
        )
        return format_cls(out)


def parse_result_format(name: ResultFormatType | str) -> ResultFormatType:
    """Resolve a format type from its value (e.g. 'json') or member name.

    Raises:
        UnknownResultFormatError: If the name matches no format type.
    """
    if isinstance(name, ResultFormatType):
        return name
    try:
        return ResultFormatType(name.strip().lower())
    except ValueError:
        raise UnknownResultFormatError(name) from None


def get_result_format(name: ResultFormatType | str, out: TextIO) -> ResultFormat:
    """Create a summary formatter from a format type or its name.

    Convenience wrapper around ResultFormatFactory.get_instance.
    """
    return ResultFormatFactory.get_instance(parse_result_format(name), out)
