# apply.py

from antsy import Color, Style, apply, apply_hyperlink
from antsy.display import DisplayTerminal

MY_STYLE = Style().fg(Color.blue()).bold()


def main():
    terminal = DisplayTerminal()
    terminal.write_line(apply(MY_STYLE, "{}!", "Hello"))
    terminal.write_line(apply_hyperlink(MY_STYLE, "https://www.python.org", "Python Language"))


if __name__ == "__main__":
    main()
