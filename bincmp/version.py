# bincmp/version.py
# Version constant. Single authoritative definition.
# Referenced by bincmp/__init__.py, run_bincmp.py (--version) and
# pyproject.toml (dynamic version).

__version__: str = "0.1.0"
