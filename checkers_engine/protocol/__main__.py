"""
Main entry point for running the checkers engine over the text protocol.

Usage:
    python -m checkers_engine.protocol
"""

from checkers_engine.protocol.interface import CheckersEngine


def main():
    engine = CheckersEngine()
    engine.run()


if __name__ == "__main__":
    main()
