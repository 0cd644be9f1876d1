#!/usr/bin/env python3
"""Attention - keeps the screen awake while an application is fullscreen or playing audio"""

import sys
import argparse

from rich.console import Console
from rich.markup import escape

from attention.config import Config
from attention.errors import AttentionError, UsageError
from attention.models import TrackingMode
from attention.monitor import Monitor
from attention import ui


console = Console()

TRACK_FLAGS = ('--track-audio', '--track-fullscreen')


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems as UsageError instead of exiting"""

    def error(self, message):
        raise UsageError(message)


class AttentionCLI:
    """Main CLI application"""

    def __init__(self, monitor_factory=None):
        self.monitor_factory = monitor_factory or Monitor

    def run(self, args):
        """Main entry point"""
        parsed_args = self.parse_args(args)

        monitor = self.monitor_factory(
            parsed_args.app_name,
            parsed_args.mode,
            app_args=parsed_args.app_args,
            config=Config()
        )
        return monitor.run()

    def create_parser(self):
        """Create argument parser"""
        parser = ArgumentParser(
            prog='attention',
            description='Disable screen blanking while an application is fullscreen or playing audio',
            add_help=False
        )

        track_group = parser.add_mutually_exclusive_group(required=True)
        track_group.add_argument(
            '--track-audio', dest='mode', action='store_const', const=TrackingMode.AUDIO,
            help='Track audio to disable power management'
        )
        track_group.add_argument(
            '--track-fullscreen', dest='mode', action='store_const', const=TrackingMode.FULLSCREEN,
            help='Track fullscreen to disable power management'
        )

        return parser

    def parse_args(self, args):
        if len(args) < 2:
            raise UsageError("Not enough arguments.")

        try:
            TrackingMode.from_flag(args[0])
        except ValueError as e:
            raise UsageError(str(e))

        # Only the tracking flags go through argparse; the application and its
        # arguments are passed on untouched
        flags = [args[0]] + [a for a in args[1:2] if a in TRACK_FLAGS]
        parsed_args = self.create_parser().parse_args(flags)
        parsed_args.app_name = args[1]
        parsed_args.app_args = args[2:]
        return parsed_args


def main():
    """Main entry point"""
    try:
        cli = AttentionCLI()
        cli.run(sys.argv[1:])
    except UsageError as e:
        ui.print_help()
        ui.print_error(escape(str(e)))
        sys.exit(1)
    except AttentionError as e:
        ui.print_error(escape(str(e)))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(130)
    except Exception as e:
        ui.print_error(escape(f"Fatal error: {e}"))
        sys.exit(1)

    sys.exit(0)


if __name__ == '__main__':
    main()
