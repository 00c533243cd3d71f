from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class MessageFileContent:
    id: int
    # primary messages as of the last export
    messages: Dict[str, Optional[str]] = field(default_factory=dict)
