"""
main.py: server launcher and entry point.

Run this file to start the reservation API:

    python main.py

The operator console is a separate Streamlit process:

    streamlit run dashboard/app.py

Direct uvicorn usage:
    uvicorn hotel_backend.main:app --reload
"""

from __future__ import annotations

import uvicorn


HOST = "127.0.0.1"
PORT = 8000


def main() -> None:
    """Start the reservation API server."""
    print("=" * 60)
    print("  Hotel Paraiso - Reservation & Scheduling Engine")
    print("=" * 60)
    print(f"  Server  : http://{HOST}:{PORT}")
    print(f"  API docs: http://{HOST}:{PORT}/docs")
    print("  Console : streamlit run dashboard/app.py")
    print("=" * 60)
    print("  Press CTRL+C to stop\n")

    uvicorn.run(
        "hotel_backend.main:app",
        host=HOST,
        port=PORT,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
