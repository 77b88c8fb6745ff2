from dataclasses import dataclass
from pathlib import Path
from typing import Literal

Strategy = Literal["matrix", "rules"]


@dataclass
class EditorConfig:
    script_file: Path
    """Script file to run"""

    strategy: Strategy = "matrix"
    """Canvas strategy: 'matrix' paints cells in place, 'rules' records
    rectangles and resolves colors when rendering"""

    verbose: bool = False
    """Log every command"""

    log_file: Path | None = None
    """Also write the log to this file"""
