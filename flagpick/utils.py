from typing import Iterable, TypeVar, cast, Optional, Union

T = TypeVar("T")


def asList(i: Optional[Union[T, list[T], tuple[T, ...]]]) -> list[T]:
    if i is None:
        return []
    if isinstance(i, list):
        return cast(list[T], i)
    if isinstance(i, tuple):
        return list(i)
    return [cast(T, i)]


def quoteJoin(strings: Iterable[str]) -> str:
    return ", ".join(f'"{s}"' for s in strings if isinstance(s, str))
