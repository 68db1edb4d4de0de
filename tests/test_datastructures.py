from deferjob._internal.common.constants import EMPTY
from deferjob._internal.common.datastructures import EmptyPlaceholder


def test_empty_placeholder() -> None:
    empty = EmptyPlaceholder()
    assert str(empty) == "EMPTY"
    assert hash(empty) == hash("EMPTY")
    assert bool(empty) is False
    assert empty == EmptyPlaceholder()
    assert EMPTY == empty
    assert empty != object()
