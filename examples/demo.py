# demo.py

import argparse

from antsy import Color, Logger, hyperlink, set_style_mode, styled
from antsy.display import DisplayTerminal


def main():
    parser = argparse.ArgumentParser(description='antsy styling demo')
    parser.add_argument('--color',
        choices=['auto', 'always', 'never'],
        default='auto',
        help='Whether to emit escape codes')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')

    args = parser.parse_args()

    logger = Logger(__name__, args.enable_logging, args.log_file)
    enabled = set_style_mode(args.color)
    logger.debug(f"Styling enabled: {enabled}")

    terminal = DisplayTerminal()

    hello = styled("Hello").fg(Color.red()).bold()
    world = styled(
        "Wor{}ld",
        styled("he{}he", styled("haha")).fg(Color.blue())
    ).fg(Color.cyan()).inverse()

    terminal.write_line(styled("{}, {}!", hello, world))
    terminal.write_line(repr(str(world)))
    terminal.write_line(repr(world.style))

    terminal.write_line(styled("strikethrough").crossed())
    terminal.write_line(hyperlink("https://google.com", "Google").bold().fg(Color.green()))

    # Same output through prompt_toolkit
    terminal.print_formatted(styled("{}, {}!", hello, world))


if __name__ == "__main__":
    main()
