"""
Text Protocol Interface

This module implements a line-oriented text protocol, modelled on UCI,
which lets a front-end play a game against the engine over stdin/stdout.

Protocol Flow:
    GUI → "checkers"
    Engine → "id name CheckersEngine 0.1.0"
    Engine → "option name AI_DEPTH type spin default 5 min 1 max 12" ...
    Engine → "checkersok"
    GUI → "setoption name AI_DEPTH value 7"
    GUI → "newgame"
    GUI → "moves 9"
    Engine → "moves 9-14 9-13"
    GUI → "play 9-13"
    Engine → "played 9-13"
    GUI → "go"
    Engine → "info depth 7 score 0 nodes 12345 time 240"
    Engine → "bestmove 22-18"
"""

from checkers_engine.protocol.interface import CheckersEngine

__all__ = ['CheckersEngine']
