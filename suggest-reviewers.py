#!/usr/bin/env python3
"""
Reviewer Suggester
Suggests pull request reviewers from the authors of the lines being changed.
"""

import os
import sys
import logging
from dotenv import load_dotenv

from reviewer_suggester.config import load_config, load_pull_request_context
from reviewer_suggester.output import OutputFormatter
from reviewer_suggester.suggester import ReviewerSuggester

# Configure logging (can be overridden by LOG_LEVEL environment variable)
log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s %(levelname)s: %(message)s',
    datefmt='%m/%d/%Y %I:%M:%S %p'
)


def main() -> int:
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    try:
        config = load_config()
        context = load_pull_request_context()

        if context is None:
            logging.warning("This action only works on pull request events")
            return 0

        logging.info(f"Suggesting reviewers for {context.repo}#{context.number} (author: {context.author})")

        output_formatter = OutputFormatter(use_color=sys.stdout.isatty())
        suggester = ReviewerSuggester(config, context, output_formatter=output_formatter)
        result = suggester.run()

        if result.reviewers:
            output_formatter.print_summary(result)
            output_formatter.write_outputs(result, os.environ.get('GITHUB_OUTPUT'))
    except Exception as e:
        logging.error(f"Action failed: {e}")
        logging.debug("Failure details", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
