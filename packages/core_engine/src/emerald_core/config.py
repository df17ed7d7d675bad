from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from emerald_core.errors import ConfigurationError

# Where to find the non-code stuff.
DATA_DIR = Path(__file__).resolve().parent / "data"

# Subdirectories of DATA_DIR copied verbatim into the output directory.
ASSET_DIRS = ("stylesheets", "javascripts", "images")

DEFAULT_TITLE = "RDoc documentation"


@dataclass(frozen=True)
class GeneratorOptions:
    """Options the host passes to whichever generator it selected.

    ``main_page`` names a file (relative name) or a class/module (qualified
    name) whose page is copied to ``index.html``.
    """

    op_dir: str = "doc"
    main_page: Optional[str] = None
    title: str = DEFAULT_TITLE
    data_dir: Path = DATA_DIR

    def __post_init__(self) -> None:
        if not str(self.op_dir).strip():
            raise ConfigurationError("Output directory must not be empty")

    @property
    def output_path(self) -> Path:
        return Path(self.op_dir).expanduser().resolve()
