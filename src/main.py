import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

from src.session import GameSession, random_move


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

BANNER = (
	"***********************************************",
	"Welcome to the Enhanced Rock-Paper-Scissors Game!",
	"***********************************************",
)


@dataclass(frozen=True)
class Settings:
	log_level: str = "WARNING"
	# Unrecognised RPS_LOG_LEVEL value, reported once logging is up.
	ignored_log_level: str | None = None


def load_settings() -> Settings:
	log_level = os.getenv("RPS_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

	if log_level not in LOG_LEVELS:
		return Settings(ignored_log_level=log_level)

	return Settings(log_level=log_level)


def configure_logging(settings: Settings) -> None:
	# Diagnostics go to stderr; stdout belongs to the game.
	logging.basicConfig(
		level=settings.log_level,
		stream=sys.stderr,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)


def _write_line(text: str) -> None:
	print(text, flush=True)


def build_session() -> GameSession:
	return GameSession(read_line=input, write_line=_write_line, choose_move=random_move)


def main() -> int:
	load_dotenv()
	settings = load_settings()
	configure_logging(settings)
	if settings.ignored_log_level:
		logger.warning(
			"RPS_LOG_LEVEL=%r is not one of %s, using %s",
			settings.ignored_log_level,
			", ".join(LOG_LEVELS),
			settings.log_level,
		)

	for line in BANNER:
		_write_line(line)

	session = build_session()
	try:
		session.run()
	except (EOFError, KeyboardInterrupt):
		# Input closed mid-prompt: same as declining to play again.
		_write_line("")
		logger.info("Input closed, ending session")
		session.finish()
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
