from typing import Callable, Union

from typing_extensions import Protocol

AddNoteMethodType = Callable[..., None]
NoteVarsType = Union[str, int]


class HeaderSource(Protocol):
    def read(self) -> Union[str, bytes]: ...
