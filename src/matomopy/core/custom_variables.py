"""Custom variables: a sparse, 1-based index of (key, value) slots.

A ``CustomVariables`` instance belongs to one scope of one event: page scope
is sent as ``cvar``, visit scope as ``_cvar``.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class CustomVariable:
    """A single custom variable.

    Attributes:
        key: Name of the variable. Must not be empty.
        value: Value of the variable. Must not be empty.
    """

    key: str
    value: str

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Custom variable key must not be null or empty")
        if not self.value:
            raise ValueError("Custom variable value must not be null or empty")


def _validate_index(index: int) -> None:
    if index <= 0:
        raise ValueError("Index must be greater than 0")


class CustomVariables:
    """Ordered mapping from slot index to custom variable.

    Iteration and JSON encoding follow slot insertion order, not index order.
    """

    def __init__(self) -> None:
        self._variables: dict[int, CustomVariable] = {}

    def add(self, variable: CustomVariable, index: int | None = None) -> "CustomVariables":
        """Add a custom variable.

        Without an index, every slot already holding the variable's key is
        overwritten in place; if there is none, the variable takes the lowest
        free index. With an index, the slot is overwritten unconditionally.

        Args:
            variable: The custom variable to add.
            index: Optional 1-based slot index.

        Returns:
            This object for method chaining.
        """
        if index is not None:
            _validate_index(index)
            self._variables[index] = variable
            return self
        matching = [i for i, existing in self._variables.items() if existing.key == variable.key]
        for i in matching:
            self._variables[i] = variable
        if not matching:
            i = 1
            while i in self._variables:
                i += 1
            self._variables[i] = variable
        return self

    def get(self, index_or_key: int | str) -> CustomVariable | str | None:
        """Look up a slot by index, or a value by key.

        By index, returns the custom variable in that slot. By key, returns the
        value of the variable with that key at the lowest index. Returns None
        when nothing matches.
        """
        if isinstance(index_or_key, str):
            if not index_or_key:
                raise ValueError("key must not be null or empty")
            for index in sorted(self._variables):
                if self._variables[index].key == index_or_key:
                    return self._variables[index].value
            return None
        _validate_index(index_or_key)
        return self._variables.get(index_or_key)

    def remove(self, index_or_key: int | str) -> None:
        """Remove the slot at an index, or every slot holding a key.

        Removing something that is not present is a no-op.
        """
        if isinstance(index_or_key, str):
            self._variables = {
                i: variable
                for i, variable in self._variables.items()
                if variable.key != index_or_key
            }
            return
        _validate_index(index_or_key)
        self._variables.pop(index_or_key, None)

    def __len__(self) -> int:
        return len(self._variables)

    def __bool__(self) -> bool:
        return bool(self._variables)

    def __iter__(self) -> Iterator[tuple[int, CustomVariable]]:
        return iter(list(self._variables.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomVariables):
            return NotImplemented
        return list(self._variables.items()) == list(other._variables.items())

    def __repr__(self) -> str:
        return f"CustomVariables({self.to_json()})"

    def to_json(self) -> str:
        """Encode as ``{"<index>":["<key>","<value>"],...}``."""
        return json.dumps(
            {str(i): [variable.key, variable.value] for i, variable in self._variables.items()},
            separators=(",", ":"),
            ensure_ascii=False,
        )

    __str__ = to_json

    @classmethod
    def parse(cls, value: str | None) -> "CustomVariables | None":
        """Parse the JSON shape produced by ``to_json``.

        This is mainly used to read custom variables back from a tracking
        cookie. Returns None for None or empty input.

        Raises:
            ValueError: If the input is not a JSON object of
                ``index -> [key, value]`` entries.
        """
        if not value:
            return None
        data = json.loads(value)
        if not isinstance(data, dict):
            raise ValueError("Custom variables must be encoded as a JSON object")
        custom_variables = cls()
        for index, pair in data.items():
            if not isinstance(pair, list) or len(pair) != 2:
                raise ValueError(f"Invalid custom variable at index {index}")
            custom_variables.add(CustomVariable(str(pair[0]), str(pair[1])), int(index))
        return custom_variables
