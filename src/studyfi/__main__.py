"""Entry point for 'python -m studyfi'."""

from studyfi.cli import main

if __name__ == "__main__":
    main()
