#!/usr/bin/env python3
"""Basic usage example"""

from event_logger import (
    CriticalLogError,
    Layout,
    LogAction,
    LoggerBuilder,
    LogLevel,
    short_formatter,
)


def main():
    # Create the shared logger with builder pattern
    logger = (LoggerBuilder()
        .with_level(LogLevel.INFO)
        .with_action(LogAction.EXIT)
        .with_layout(Layout(short_formatter))
        .with_console(colored=True)
        .install())

    # Log messages
    logger.trace("This is trace")  # filtered out by INFO
    logger.info("Application started", {"userId": 123, "sessionId": "abc"})

    try:
        logger.warn("Disk almost full")
    except CriticalLogError as e:
        print(f"Stopped on: {e}")

    state = logger.export_state()
    print(f"errors={state['errorCount']} warnings={state['warningCount']}")


if __name__ == "__main__":
    main()
