"""Console entry point: `ev-range-studio` starts the Streamlit app"""
import os
import sys

from streamlit.web import cli as stcli


def main():
    app_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "streamlit_app.py")
    sys.argv = ["streamlit", "run", app_path] + sys.argv[1:]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
