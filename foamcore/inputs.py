"""Reading objects from either a Dictionary or a TokenList."""

from __future__ import annotations

from typing import Any, Union

from foamcore.dictionary import Dictionary
from foamcore.token_list import TokenList

Input = Union[Dictionary, TokenList]


def read(data_class: Any, input_value: Input) -> Any:
    """Build ``data_class`` from the input by calling its ``read`` classmethod."""
    if not isinstance(input_value, (Dictionary, TokenList)):
        raise TypeError(
            f"input must be a Dictionary or TokenList, not {type(input_value).__qualname__}"
        )
    return data_class.read(input_value)