"""
Checkers Engine

An English draughts engine for playing against the computer: immutable
positions, legal move generation with forced captures and multi-jumps,
material evaluation and minimax search with alpha-beta pruning.

## Architecture

The engine is organized into several key modules:

1. **board**: Position model and move generation
   - 32-square immutable positions with side to move and chain origin
   - Legal successors (forced capture, multi-jump chains, promotion)
   - FEN-style strings and 4-channel tensors

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: men and kings, king = 2 men

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning, depth 1-12 plies

4. **game**: Game controller
   - Settings (AI depth, forced capture, first move)
   - Player/AI moves, undo and restart

5. **protocol**: Line-oriented text protocol
   - Lets a front-end drive a game over stdin/stdout
   - Enforces a minimum AI "thinking" pause

6. **utils**: Testing and benchmarking utilities
   - Perft move generation counts
   - Tactical test suite

## Quick Start

### As a Python Library

```python
from checkers_engine.game import Game, Settings

game = Game(Settings(ai_depth=5))
move = game.valid_moves_from(9)[0]
game.player_move(move)
reply = game.ai_move()
print(f"AI played {reply}")
```

### As a Text Protocol Engine

```bash
python -m checkers_engine.protocol
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__author__ = "Alix Muller"
__license__ = "MIT"

from checkers_engine.board import Move, Player, Position, initial_position, successors
from checkers_engine.evaluation import Evaluator, MaterialEvaluator
from checkers_engine.search import choose_move, find_best_move, minimax
from checkers_engine.game import Game, Settings

__all__ = [
    'Move',
    'Player',
    'Position',
    'initial_position',
    'successors',
    'Evaluator',
    'MaterialEvaluator',
    'choose_move',
    'find_best_move',
    'minimax',
    'Game',
    'Settings',
]
