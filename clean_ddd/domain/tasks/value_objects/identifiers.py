from dataclasses import dataclass
from typing import ClassVar

from clean_ddd.domain.shared import Identifier


@dataclass(frozen=True)
class TaskId(Identifier):
    entity_name: ClassVar[str] = "Task"
