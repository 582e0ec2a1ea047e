"""
linguatutor CLI entry point.

Provides commands for serving the HTTP API and for one-shot tutor requests.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from linguatutor import __version__
from linguatutor.config.logging import get_logger, setup_logging
from linguatutor.config.settings import Settings, load_settings
from linguatutor.llm.models import ConfigurationError
from linguatutor.tutor.languages import SupportedLanguage, list_supported_languages


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="linguatutor",
        description="LLM-backed language tutor with multi-model fallback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"linguatutor {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("config", help="Show current configuration")
    subparsers.add_parser("languages", help="List supported target languages")

    chat_parser = subparsers.add_parser(
        "chat",
        help="Send one message to the tutor and print the structured answer",
    )
    chat_parser.add_argument(
        "message",
        help='What the learner said, e.g. "I go to school yesterday"',
    )
    chat_parser.add_argument(
        "--language",
        choices=[language.value for language in SupportedLanguage],
        default=SupportedLanguage.ENGLISH.value,
        help="Target language (default: english)",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument(
        "--host",
        default=None,
        help="Bind address (default: SERVER_HOST from config)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Listen port (default: SERVER_PORT from config)",
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== linguatutor Configuration ===\n")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nLLM Models: {', '.join(settings.llm.models)}")
    logger.info(f"LLM API Key: {'Set' if settings.llm.api_key else 'Not set'}")
    logger.info(f"LLM Temperature: {settings.llm.temperature}")
    logger.info(f"LLM Timeout: {settings.llm.timeout}s")
    logger.info(f"\nServer: {settings.server.host}:{settings.server.port}")
    logger.info(f"CORS Origins: {', '.join(settings.server.cors_origins)}")

    return 0


def cmd_languages() -> int:
    """Print the supported languages."""
    for language in list_supported_languages():
        print(f"{language['code']:<10} {language['name']} ({language['nativeName']})")
    return 0


async def cmd_chat(args, settings: Settings) -> int:
    """
    Send a single utterance through the full tutor pipeline.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    from linguatutor.tutor.service import TutorService, TutorServiceError

    logger = get_logger(__name__)

    try:
        service = TutorService.from_settings(settings.llm)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    try:
        response = await service.send_message(args.message, [], args.language)
    except TutorServiceError as e:
        print(f"\nTutor error: {e.message}", file=sys.stderr)
        if e.retryable:
            print("Tip: all models are rate limited, try again in a minute.", file=sys.stderr)
        return 1

    data = response.data
    print(f"\n=== Tutor [{args.language}] ===")
    print(f"You said:      {data.original}")
    print(f"Correction:    {data.correction}")
    print(f"Pronunciation: {data.correction_pronunciation}")
    if data.explanation:
        print(f"Explanation:   {data.explanation}")
    print(f"\n{data.reply}")
    if data.pronunciation:
        print(f"{data.pronunciation}")
    return 0


def cmd_serve(args, settings: Settings) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from linguatutor.api.app import create_app
    from linguatutor.tutor.service import TutorService

    logger = get_logger(__name__)

    host = args.host or settings.server.host
    port = args.port or settings.server.port

    # Fail before binding the port when the provider isn't configured
    try:
        service = TutorService.from_settings(settings.llm)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    app = create_app(settings, service=service)

    logger.info(f"Server is running on port {port}")
    # log_config=None: keep our logging setup instead of uvicorn's
    uvicorn.run(app, host=host, port=port, log_config=None)
    return 0


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "languages":
        return cmd_languages()
    elif args.command == "chat":
        return asyncio.run(cmd_chat(args, settings))
    elif args.command == "serve":
        return cmd_serve(args, settings)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
