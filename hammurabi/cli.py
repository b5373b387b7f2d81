"""
Hammurabi CLI - Command-line interface for the game.

Usage:
    hammurabi play [--years N] [--seed S]    Play interactively in the terminal
    hammurabi serve [--host H] [--port P]    Run the HTTP API
"""

import argparse
import sys

from .config import (
    HAMMURABI_DEFAULT_YEARS,
    HAMMURABI_HOST,
    HAMMURABI_PORT,
    configure_logging,
)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Hammurabi - rule ancient Samaria",
        prog="hammurabi",
    )
    parser.add_argument("--log-level", help="Logging level (default from HAMMURABI_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play Hammurabi interactively turn by turn")
    play_parser.add_argument(
        "--years", "-y",
        type=int,
        default=HAMMURABI_DEFAULT_YEARS,
        help="Max number of years to play",
    )
    play_parser.add_argument("--seed", type=int, help="Seed for the random events")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=HAMMURABI_HOST)
    serve_parser.add_argument("--port", type=int, default=HAMMURABI_PORT)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, stdin=None):
    """
    Play one game in the terminal.

    Returns 0 when the term is completed or input ends, 1 on an uprising.
    """
    from .engine_core.errors import Uprising
    from .interactive import ACTION_PROMPT, InvalidInput, format_intro, format_report, parse_action
    from .session import SessionManager, SessionState, GameLoop

    stdin = stdin or sys.stdin
    if args.years < 1:
        print(f"Error: --years must be at least 1, got {args.years}")
        sys.exit(1)

    session = SessionManager().create_session(max_years=args.years, seed=args.seed)
    loop = GameLoop(session)
    print(format_intro(args.years))

    show_report = True
    while session.is_active():
        game = session.game
        if show_report:
            print()
            print(format_report(game.year, game.state, game.delta))
        show_report = False

        print()
        print(ACTION_PROMPT)
        line = stdin.readline()
        if not line:
            print("\nFarewell, Hammurabi.")
            return 0

        try:
            action = parse_action(line)
        except InvalidInput as e:
            print(e)
            print("Once again?")
            continue

        result = loop.play_turn(action)
        print()
        if isinstance(result.error, Uprising):
            print(result.error)
            print(
                "Due to this extreme mismanagement, you have not only been impeached "
                "and thrown out of office, but you have also been declared 'National Fink'!"
            )
            return 1
        if result.error:
            print("O Great Hammurabi, surely you jest! We seem to have problem understanding your decisions!")
            print(result.error)
            continue

        show_report = True

    if session.status == SessionState.COMPLETED:
        game = session.game
        print(format_report(game.year, game.state, game.delta))
        print()
        print(f"Your {game.max_years}-year term of office is over. The people thank you, Hammurabi.")
    return 0


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("hammurabi.api.app:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
