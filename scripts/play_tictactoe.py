"""Play tic-tac-toe between minimax (or random) agents and print the game."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

import yaml
from tqdm import tqdm

# Add parent dir to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from agents import MinimaxAgent, RandomAgent, play
from games.tictactoe import TicTacToeGame

# Game registry
GAME_REGISTRY = {
    'tictactoe': TicTacToeGame,
}

PLAYER_KINDS = ('minimax', 'random')


def load_config(path: str) -> Dict:
    with open(path) as f:
        return yaml.safe_load(f)


def build_agent(kind: str, agent_id, config: Dict, seed=None):
    """Create an agent of the given kind from the 'search' config section."""
    if kind == 'minimax':
        search_config = config['search']
        return MinimaxAgent(
            agent_id,
            depth=search_config['depth'],
            persist_cache=search_config.get('persist_cache', False),
        )
    if kind == 'random':
        return RandomAgent(agent_id, seed=seed)
    raise ValueError(f"Unknown player: {kind}. Available: {list(PLAYER_KINDS)}")


def run_games(config: Dict, num_games: int = 1, show_progress: bool = False) -> Dict:
    """Play num_games games and tally the results.

    Returns:
        Dict with 'x_wins', 'o_wins', 'draws' counts and the 'last_game'
        (final board) and 'last_log' (move log)
    """
    game_name = config.get('game', 'tictactoe')
    if game_name not in GAME_REGISTRY:
        raise ValueError(f"Unknown game: {game_name}. Available: {list(GAME_REGISTRY.keys())}")
    game_class = GAME_REGISTRY[game_name]

    players = config.get('players', {})
    seed = config.get('seed')
    player_x = build_agent(players.get('x', 'minimax'), game_class.PLAYER_1, config, seed=seed)
    player_o = build_agent(players.get('o', 'minimax'), game_class.PLAYER_2,
                           config, seed=None if seed is None else seed + 1)

    results = {'x_wins': 0, 'o_wins': 0, 'draws': 0, 'last_game': None, 'last_log': []}
    for _ in tqdm(range(num_games), desc="Games", disable=not show_progress):
        for agent in (player_x, player_o):
            if isinstance(agent, MinimaxAgent):
                agent.clear_cache()

        board = game_class.initial_state()
        log = play(board, player_x, player_o)

        winner = board.winner()
        if winner == game_class.PLAYER_1:
            results['x_wins'] += 1
        elif winner == game_class.PLAYER_2:
            results['o_wins'] += 1
        else:
            results['draws'] += 1
        results['last_game'] = board
        results['last_log'] = log

    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description='Tic-tac-toe with memoized minimax agents')
    parser.add_argument('--config', type=str, default='config/tictactoe.yaml',
                        help='Path to config file')
    parser.add_argument('--depth', type=int, default=None,
                        help='Search depth (overrides config)')
    parser.add_argument('--opponent', type=str, default=None, choices=PLAYER_KINDS,
                        help='Player type for O (overrides config)')
    parser.add_argument('--games', type=int, default=1,
                        help='Number of games to play')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S',
    )

    config = load_config(args.config)

    # Override config with CLI args
    if args.depth is not None:
        config['search']['depth'] = args.depth
    if args.opponent is not None:
        config.setdefault('players', {})['o'] = args.opponent

    results = run_games(config, num_games=args.games, show_progress=args.games > 1)

    board = results['last_game']
    symbols = TicTacToeGame.SYMBOLS
    for agent_id, move in results['last_log']:
        print(f"Player: {symbols[agent_id]}, moved {move}")
    print(board.render())

    winner = board.winner()
    if winner is None:
        print("The game ended in a draw")
    else:
        print(f"Player {symbols[winner]} wins.")

    if args.games > 1:
        print("\n" + "=" * 50)
        print(f"Total games:  {args.games}")
        print(f"X wins:       {results['x_wins']}")
        print(f"O wins:       {results['o_wins']}")
        print(f"Draws:        {results['draws']}")
        print("=" * 50)

    return results


if __name__ == '__main__':
    main()
