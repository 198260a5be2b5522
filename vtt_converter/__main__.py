"""Package entry point for ``python -m vtt_converter``.

WHY: Users run the converter as ``python -m vtt_converter captions.vtt``
for CLI mode, or ``python -m vtt_converter --serve`` to start the HTTP
service with its upload page.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
FastAPI app under uvicorn. Otherwise, delegates to the CLI's main().
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from vtt_converter.server.app import run_api
        run_api()
    else:
        from vtt_converter.cli import main
        main()
