from dataclasses import dataclass
from typing import Optional

@dataclass
class Game:
    name: str
    exe_path: str
    id: Optional[int] = None        # None until the store assigns one
