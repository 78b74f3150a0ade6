"""
Text Protocol Implementation

This module implements a line-oriented protocol, modelled on UCI, through
which a front-end drives a game against the engine: it configures the
game, asks which moves a piece has, commits the human's moves and asks the
AI to move.

Commands Supported:
    - checkers: Identify engine and list options
    - isready: Synchronization check
    - setoption name <NAME> value <VALUE>: Configure the next game
    - newgame: Start a new game with the configured settings
    - position [fen <FEN>]: Report (or set) the current position
    - moves <square>: Legal moves of the piece on a square
    - play <move>: Commit a human move ("9-13", "13x22x31")
    - go: Let the AI play its move
    - undo: Take back the last half-move
    - status: Side to move and game result
    - help: Short instructions
    - quit: Shutdown engine

Pacing:
    The AI never answers faster than MIN_PAUSE milliseconds. The search
    itself runs at full speed; the remaining time is slept before the
    answer is written, so the engine core stays free of any delay.
"""

import logging
import re
import sys
import time
from pathlib import Path
from typing import List, Optional

from checkers_engine.board.movegen import Move
from checkers_engine.board.position import Player
from checkers_engine.board.representation import position_from_fen, position_to_fen
from checkers_engine.evaluation.base import INFINITY
from checkers_engine.game.controller import Game
from checkers_engine.game.settings import Settings
from checkers_engine.search.minimax import MAX_DEPTH, MIN_DEPTH

DEFAULT_MIN_PAUSE_MS = 500
MAX_PAUSE_MS = 10000

HELP_LINES = [
    "1. Ask for the moves of a piece: moves <square>",
    "2. Play one of them: play <move>",
    "3. Let the computer answer: go",
]

DEFAULT_LOG_FILE = Path.home() / ".checkers_engine" / "engine.log"


def setup_logger(debug=True, log_file: Optional[Path] = None):
    """
    Setup file-based logger for protocol debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Log file path (default: ~/.checkers_engine/engine.log)

    Returns:
        Configured logger instance
    """
    log_file = Path(log_file) if log_file else DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("checkers_engine")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def parse_move_squares(text: str) -> List[int]:
    """
    Split move notation ("9-13", "13x22x31", "9 13") into square indices.

    Raises:
        ValueError: If the notation holds fewer than two squares or a
            non-numeric token
    """
    tokens = [token for token in re.split(r"[-xX\s]+", text.strip()) if token]
    if len(tokens) < 2:
        raise ValueError(f"Invalid move: {text!r}")
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise ValueError(f"Invalid move: {text!r}") from None


def format_score(score: float) -> str:
    """Score from the AI's perspective; decided games print as win/loss."""
    if score == INFINITY:
        return "win"
    if score == -INFINITY:
        return "loss"
    return f"{score:g}"


class CheckersEngine:
    """
    Protocol front-end for one game against the engine.

    This class handles all protocol communication and drives a Game
    controller.

    Attributes:
        game: Game controller holding the current position and history
        pending_settings: Settings for the next 'newgame'
        min_pause_ms: Minimum time between 'go' and the AI's answer

    Methods:
        run: Main command loop
        handle_checkers: Respond to 'checkers' command
        handle_isready: Respond to 'isready' command
        handle_setoption: Change a setting for the next game
        handle_newgame: Restart the game
        handle_position: Report or set the position
        handle_moves: List legal moves of a piece
        handle_play: Commit a human move
        handle_go: Play the AI's move
        handle_undo: Take back a half-move
        handle_status: Report turn and result
        handle_help: Print instructions
        handle_quit: Shutdown engine
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        min_pause_ms: int = DEFAULT_MIN_PAUSE_MS,
        debug: bool = True,
        log_file: Optional[Path] = None,
    ):
        """
        Initialize the engine front-end.

        Args:
            settings: Settings of the first game (default: Settings())
            min_pause_ms: Minimum AI answer time in milliseconds (default: 500)
            debug: Enable debug logging (default: True)
            log_file: Log file path (default: ~/.checkers_engine/engine.log)
        """
        self.pending_settings = settings if settings else Settings()
        self.game = Game(self.pending_settings)
        self.min_pause_ms = min_pause_ms

        # Engine info
        self.name = "CheckersEngine"
        self.version = "0.1.0"
        self.author = "Alix Muller"

        self.logger = setup_logger(debug=debug, log_file=log_file)
        self.logger.info("=== Checkers Engine Started ===")

    def send(self, line: str):
        """Write one response line to stdout."""
        print(line)
        sys.stdout.flush()
        self.logger.debug(f"<<< {line}")

    def run(self):
        """
        Main command loop.

        Listens for commands on stdin and responds on stdout.
        Runs until 'quit' command is received or stdin is closed.
        """
        handlers = {
            "checkers": self.handle_checkers,
            "isready": self.handle_isready,
            "setoption": self.handle_setoption,
            "newgame": self.handle_newgame,
            "position": self.handle_position,
            "moves": self.handle_moves,
            "play": self.handle_play,
            "go": self.handle_go,
            "undo": self.handle_undo,
            "status": self.handle_status,
            "help": self.handle_help,
        }

        while True:
            try:
                # Read command from stdin
                command = input().strip()

                if not command:
                    continue

                self.logger.debug(f">>> {command}")

                tokens = command.split()
                cmd = tokens[0].lower()

                if cmd == "quit":
                    self.handle_quit()
                    break

                handler = handlers.get(cmd)
                if handler is None:
                    # Unknown command - ignore it
                    self.logger.debug(f"Unknown command ignored: {command}")
                    continue

                handler(tokens)

            except EOFError:
                self.logger.info("EOF received, shutting down")
                break
            except Exception as e:
                self.logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

    def handle_checkers(self, tokens=None):
        """
        Handle 'checkers' command - identify engine.

        Response:
            id name CheckersEngine 0.1.0
            id author Alix Muller
            option name ... (one line per option)
            checkersok
        """
        self.logger.info("Handling: checkers")

        defaults = Settings()
        self.send(f"id name {self.name} {self.version}")
        self.send(f"id author {self.author}")
        self.send(
            f"option name AI_DEPTH type spin default {defaults.ai_depth} "
            f"min {MIN_DEPTH} max {MAX_DEPTH}"
        )
        self.send(
            f"option name FORCE_TAKES type check default "
            f"{'true' if defaults.force_takes else 'false'}"
        )
        self.send(
            f"option name FIRST_MOVE type combo default {defaults.first_move.value} "
            f"var human var ai"
        )
        self.send(
            f"option name MIN_PAUSE type spin default {DEFAULT_MIN_PAUSE_MS} "
            f"min 0 max {MAX_PAUSE_MS}"
        )
        self.send("checkersok")

    def handle_isready(self, tokens=None):
        """
        Handle 'isready' command - synchronization.

        Response:
            readyok
        """
        self.logger.info("Handling: isready")
        self.send("readyok")

    def handle_setoption(self, tokens):
        """
        Handle 'setoption' command.

        Format:
            setoption name AI_DEPTH value 7

        AI_DEPTH, FORCE_TAKES and FIRST_MOVE take effect at the next
        'newgame'; MIN_PAUSE takes effect immediately.

        Raises:
            ValueError: For a malformed command, unknown option or bad value
        """
        self.logger.info(f"Handling: setoption {' '.join(tokens[1:])}")

        try:
            name_index = tokens.index("name")
            value_index = tokens.index("value")
        except ValueError:
            raise ValueError("Usage: setoption name <NAME> value <VALUE>") from None

        name = " ".join(tokens[name_index + 1:value_index])
        value = " ".join(tokens[value_index + 1:])
        if not name or not value:
            raise ValueError("Usage: setoption name <NAME> value <VALUE>")

        if name.upper() == "MIN_PAUSE":
            pause = int(value)
            if not 0 <= pause <= MAX_PAUSE_MS:
                raise ValueError(f"MIN_PAUSE must be between 0 and {MAX_PAUSE_MS}, got {pause}")
            self.min_pause_ms = pause
            return

        self.pending_settings = self.pending_settings.with_option(name, value)
        self.logger.debug(f"Pending settings: {self.pending_settings}")

    def handle_newgame(self, tokens=None):
        """Handle 'newgame' command - restart with the pending settings."""
        self.logger.info("Handling: newgame")
        self.game.restart(self.pending_settings)

    def handle_position(self, tokens):
        """
        Handle 'position' command.

        Formats:
            position             → reports "position <fen>"
            position fen <FEN>   → continues play from <FEN>, clears history
        """
        if len(tokens) > 1:
            if tokens[1] != "fen" or len(tokens) < 3:
                raise ValueError("Usage: position [fen <FEN>]")
            fen = "".join(tokens[2:])
            self.logger.info(f"Handling: position fen {fen}")
            self.game.set_position(position_from_fen(fen))
            return

        self.send(f"position {position_to_fen(self.game.position)}")

    def handle_moves(self, tokens):
        """
        Handle 'moves' command - list the legal moves of one piece.

        Format:
            moves 9

        Response:
            moves 9-14 9-13   (just "moves" if the piece cannot move)
        """
        if len(tokens) != 2:
            raise ValueError("Usage: moves <square>")

        square = int(tokens[1])
        moves = self.game.valid_moves_from(square)
        self.send(" ".join(["moves"] + [move.notation() for move in moves]))

    def _find_move(self, text: str) -> Move:
        squares = parse_move_squares(text)
        moves = self.game.legal_moves()

        exact = [m for m in moves if [m.from_square, *m.path] == squares]
        if exact:
            return exact[0]

        # "from to" shorthand, accepted when it names a single move
        if len(squares) == 2:
            matching = [
                m for m in moves
                if m.from_square == squares[0] and m.to_square == squares[1]
            ]
            if len(matching) == 1:
                return matching[0]
            if len(matching) > 1:
                raise ValueError(f"Ambiguous move: {text} (give the full capture path)")

        raise ValueError(f"Illegal move: {text}")

    def handle_play(self, tokens):
        """
        Handle 'play' command - commit a human move.

        Formats:
            play 9-13
            play 13x22x31

        Response:
            played <move>
            result <winner>   (only when the move ends the game)

        Raises:
            ValueError: If it is not the human's turn or the move is illegal
        """
        self.logger.info(f"Handling: play {' '.join(tokens[1:])}")

        if len(tokens) < 2:
            raise ValueError("Usage: play <move>")
        if self.game.is_over:
            raise ValueError("Game is over")
        if self.game.turn is not Player.HUMAN:
            raise ValueError("Not the human's turn")

        move = self._find_move(" ".join(tokens[1:]))
        self.game.player_move(move)
        self.send(f"played {move.notation()}")

        if self.game.is_over:
            self.send(f"result {self.game.winner.value}")

    def handle_go(self, tokens=None):
        """
        Handle 'go' command - let the AI play.

        Output:
            info depth D score S nodes N time T
            bestmove <move>
            result <winner>   (only when the move ends the game)

        "bestmove none" is sent when the game is already over.

        Raises:
            ValueError: If it is the human's turn
        """
        self.logger.info("Handling: go")

        if self.game.is_over:
            self.send("bestmove none")
            return
        if self.game.turn is not Player.AI:
            raise ValueError("Not the AI's turn")

        start_time = time.time()
        move = self.game.ai_move()
        elapsed_ms = int((time.time() - start_time) * 1000)

        info = self.game.last_search
        self.logger.info(
            f"Search complete: best_move={move}, score={info.score}, "
            f"nodes={info.nodes}, time={elapsed_ms}ms"
        )

        # Enforce the minimum answer time
        delay_ms = max(0, self.min_pause_ms - elapsed_ms)
        if delay_ms:
            time.sleep(delay_ms / 1000)

        self.send(
            f"info depth {info.depth} score {format_score(info.score)} "
            f"nodes {info.nodes} time {elapsed_ms}"
        )
        self.send(f"bestmove {move.notation()}")

        if self.game.is_over:
            self.send(f"result {self.game.winner.value}")

    def handle_undo(self, tokens=None):
        """
        Handle 'undo' command - take back the last half-move.

        Raises:
            ValueError: If there is nothing to undo
        """
        self.logger.info("Handling: undo")
        self.game.undo()
        self.send("undone")

    def handle_status(self, tokens=None):
        """
        Handle 'status' command.

        Response:
            turn <human|ai>
            result <ongoing|human|ai>
        """
        self.send(f"turn {self.game.turn.value}")
        winner = self.game.winner
        self.send(f"result {winner.value if winner else 'ongoing'}")

    def handle_help(self, tokens=None):
        """Handle 'help' command - print instructions."""
        for line in HELP_LINES:
            self.send(f"info {line}")

    def handle_quit(self):
        """Handle 'quit' command - shutdown engine."""
        self.logger.info("=== Checkers Engine Stopped ===")
