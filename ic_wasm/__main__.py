"""Allow ``python -m ic_wasm``."""

from .cli import main

main()
