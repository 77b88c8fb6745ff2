"""Main entry point for running bitmap_editor as a module."""
from .main import main

if __name__ == "__main__":
    main()
