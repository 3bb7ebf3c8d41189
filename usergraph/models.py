from dataclasses import dataclass
from typing import Union

UserID = Union[int, str]


@dataclass
class User:
    id: UserID
    name: str
    email: str
