import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_game' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

ALGORITHMS = ["backtrack", "noise"]


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Maze Game: maze generation and start/goal placement")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and place start/goal")
    gen_parser.add_argument("--width", type=int, default=16, help="Maze width in cells")
    gen_parser.add_argument("--height", type=int, default=12, help="Maze height in cells")
    gen_parser.add_argument("--algo", type=str, default="backtrack", choices=ALGORITHMS, help="Generation algorithm")
    gen_parser.add_argument("--wall-prob", type=float, default=0.3, help="Wall probability (noise only)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    gen_parser.add_argument("--cell-size", type=float, default=50, help="Cell size in pixels")
    gen_parser.add_argument("--min-distance", type=float, default=5.0, help="Minimum start/goal distance in cells (0 disables)")
    gen_parser.add_argument("--out", type=str, help="Output file path (optional)")
    gen_parser.add_argument("--compress", action="store_true", help="zlib-compress the saved cells")
    gen_parser.add_argument("--print", dest="print_maze", action="store_true", help="Print the maze as text")

    # Play Command
    play_parser = subparsers.add_parser("play", help="Open a preview window for a new session")
    play_parser.add_argument("--viewport", type=int, nargs=2, default=[800, 600], metavar=("W", "H"), help="Viewport size")
    play_parser.add_argument("--algo", type=str, default="backtrack", choices=ALGORITHMS, help="Generation algorithm")
    play_parser.add_argument("--wall-prob", type=float, default=0.3, help="Wall probability (noise only)")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument("--show-maze", action="store_true", help="Start with the whole maze visible")

    # Show Command
    show_parser = subparsers.add_parser("show", help="Print a saved maze")
    show_parser.add_argument("input_file", help="Path to maze file")

    return parser


def run_generate(args, logger):
    import random
    from maze_game.algo import generate
    from maze_game.core.analysis import MazeAnalyzer
    from maze_game.core.placement import find_start_position, find_goal_position

    logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")

    rng = random.Random(args.seed)
    grid = generate(args.width, args.height, args.algo, wall_probability=args.wall_prob, rng=rng)

    footprint = args.cell_size / 2
    start = find_start_position(grid, footprint, footprint, cell_size=args.cell_size, rng=rng)
    min_distance = args.min_distance * args.cell_size if args.min_distance > 0 else None
    goal = find_goal_position(grid, start, min_distance=min_distance, cell_size=args.cell_size, rng=rng)
    logger.info(f"Start: {tuple(start)}  Goal: {tuple(goal)}")

    stats = MazeAnalyzer.calculate_stats(grid)
    logger.info(f"Stats: {stats}")

    start_cell = (int(start.x // args.cell_size), int(start.y // args.cell_size))
    goal_cell = (int(goal.x // args.cell_size), int(goal.y // args.cell_size))
    path = MazeAnalyzer.shortest_path(grid, start_cell, goal_cell)
    if path:
        logger.info(f"Solution length: {len(path)}")
    else:
        logger.warning("Goal is not reachable from the start")

    if args.print_maze:
        print(grid.to_text())

    # Save output if requested
    if args.out:
        logger.info(f"Saving maze to {args.out}...")
        from maze_game.io.serializer import MazeSerializer
        meta = {
            "algo": args.algo,
            "seed": args.seed,
            "cell_size": args.cell_size,
            "start": list(start),
            "goal": list(goal),
        }
        MazeSerializer.save(grid, args.out, meta=meta, compress=args.compress)
        logger.info("Save complete.")


def run_play(args, logger):
    from maze_game.session import GameConfig, GameSession
    from maze_game.viz.renderer import Renderer

    config = GameConfig(
        viewport_width=args.viewport[0],
        viewport_height=args.viewport[1],
        algorithm=args.algo,
        wall_probability=args.wall_prob,
        seed=args.seed,
    )
    session = GameSession(config)
    session.start()
    session.maze_visible = args.show_maze

    logger.info("Visual mode enabled - Opening window...")
    renderer = Renderer(session)
    renderer.init_window()
    renderer.run_loop()


def run_show(args, logger):
    from maze_game.io.serializer import MazeSerializer

    logger.info(f"Loading {args.input_file}...")
    grid, meta = MazeSerializer.load(args.input_file)
    logger.info(f"Loaded {grid.width}x{grid.height} maze. Meta: {meta}")
    print(grid.to_text())


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_game")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    from maze_game.core.errors import MazeError

    try:
        if args.command == "generate":
            run_generate(args, logger)
        elif args.command == "play":
            run_play(args, logger)
        elif args.command == "show":
            run_show(args, logger)
    except MazeError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
