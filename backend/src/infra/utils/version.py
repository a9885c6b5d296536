import importlib.util
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "ship-status-dashboard"
DEFAULT_VERSION = "0.0.0"


def _read_version_module(version_module_path: Path) -> str | None:
    if not version_module_path.is_file():
        return None

    spec = importlib.util.spec_from_file_location("version", version_module_path)

    if spec is None or spec.loader is None:
        return None

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    return getattr(module, "__version__", None)


def get_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass

    src_root = Path(__file__).parent.parent.parent

    return _read_version_module(src_root / "version.py") or DEFAULT_VERSION
