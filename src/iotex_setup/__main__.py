"""Entry point for running the setup as a module.

This allows running: python -m iotex_setup sk-xxx [MODEL] [AUDIO_MODEL] [--default]
"""

from .cli import main

if __name__ == "__main__":
    # No try/except here: main() is the CLI boundary and already catches all
    # exceptions, logs them, and exits with the appropriate code.
    main()
