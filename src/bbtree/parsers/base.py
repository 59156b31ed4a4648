#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/parsers/base.py
"""Base classes for markup parsers.

This module defines the abstract base class that all parsers must inherit from.
The BaseParser provides a consistent interface for converting source markup
into a raw bbtree tree rooted at a DOCUMENT node.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from bbtree.ast.nodes import TreeNode
from bbtree.exceptions import InvalidOptionsError, ValidationError
from bbtree.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from bbtree.ast.nodes import NodeKind, TreeNode
        >>> class PlainParser(BaseParser):
        ...     def parse(self, input_data):
        ...         root = TreeNode(NodeKind.DOCUMENT)
        ...         root.append_child(TreeNode(NodeKind.TEXT, self._load_text(input_data)))
        ...         return root

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text(input_data: Union[str, bytes, None]) -> str:
        """Normalize parser input to a string.

        Parameters
        ----------
        input_data : str, bytes or None
            Source markup; bytes are decoded as UTF-8

        Returns
        -------
        str
            Decoded text, empty for None

        Raises
        ------
        ValidationError
            If the input is of an unsupported type or not valid UTF-8

        """
        if input_data is None:
            return ""
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, (bytes, bytearray)):
            try:
                return bytes(input_data).decode("utf-8")
            except UnicodeDecodeError as e:
                raise ValidationError(
                    "Input bytes are not valid UTF-8",
                    parameter_name="input_data",
                    original_error=e,
                ) from e
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )

    @abstractmethod
    def parse(self, input_data: Union[str, bytes, None]) -> TreeNode:
        """Parse source markup into a raw tree.

        Parameters
        ----------
        input_data : str, bytes or None
            The markup to parse

        Returns
        -------
        TreeNode
            DOCUMENT node holding the parsed content. Not yet optimized.

        """
        raise NotImplementedError
