"""
Main Output Handler Module.

This module provides the OutputHandler class that turns a command's
:class:`~tabula.output_handler.output.Output` into text in the format
selected on the command line.
"""

from typing import Callable, Dict, List, Optional

from config import get_config
from tabula.utils.logger import get_logger
from tabula.utils.exceptions import UnsupportedFormatError
from .output import Output

# Initialize module logger
logger = get_logger(__name__)


class OutputHandler:
    """
    Renders command outputs in one output format.

    Attributes:
        output_format: Name of the selected format

    Example:
        >>> handler = OutputHandler("json")
        >>> print(handler.render(command.execute()))
    """

    FORMATS: Dict[str, Callable[[Output], str]] = {
        'json': lambda output: output.as_json(),
        'txt': lambda output: output.as_txt(),
        'beancount': lambda output: output.as_beancount(),
    }

    def __init__(self, output_format: Optional[str] = None) -> None:
        """
        Initialize the output handler.

        Args:
            output_format: Format name. Defaults to ``output.default_format``
                           from configuration.

        Raises:
            UnsupportedFormatError: If the format is unknown.
        """
        name = output_format or get_config("output.default_format", "txt")
        self.output_format = name.lower()

        if self.output_format not in self.FORMATS:
            raise UnsupportedFormatError(name)

        logger.debug(f"OutputHandler initialized (format={self.output_format})")

    @classmethod
    def supported_formats(cls) -> List[str]:
        """Names accepted by the constructor, used as CLI choices."""
        return list(cls.FORMATS)

    def render(self, output: Output) -> str:
        """
        Encode ``output`` in the selected format.

        Raises:
            UnsupportedFormatError: If the output has no encoding in the
                                    selected format.
        """
        return self.FORMATS[self.output_format](output)
