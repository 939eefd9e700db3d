"""Streamlit Cloud entry point.

Deployments launch ``streamlit_app.py`` as the main module; the application
itself lives in :mod:`medisense_app`, so we simply forward ``main`` here.
"""

from medisense_app import main as medisense_main


def main() -> None:
    """Invoke the MediSense application."""

    medisense_main()


if __name__ == "__main__":  # pragma: no cover
    main()
