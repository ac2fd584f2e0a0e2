from importlib import metadata

try:
    __version__ = metadata.version("simulador-financeiro")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    from simulador import __version__
