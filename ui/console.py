"""
console.py - CLI output helpers using ANSI codes (Lightweight Rich alternative).
"""

import sys

# ANSI Colors
C_RESET = "\033[0m"
C_BLUE = "\033[34m"
C_CYAN = "\033[36m"
C_GREEN = "\033[32m"
C_YELLOW = "\033[33m"
C_RED = "\033[31m"
C_BOLD = "\033[1m"
C_DIM = "\033[2m"

PANEL_WIDTH = 72


def title(text):
    print(f"\n{C_BOLD}{C_BLUE}REVENUE IMPACT{C_RESET} | {text}")
    print(f"{C_DIM}{'='*40}{C_RESET}")

def success(text):
    print(f"{C_GREEN}✔{C_RESET} {text}")

def error(text):
    print(f"{C_RED}✖{C_RESET} {text}", file=sys.stderr)

def warning(text):
    print(f"{C_YELLOW}!{C_RESET} {text}")

def _clip(line, width):
    return line if len(line) <= width else line[: width - 1] + "…"

def print_panel(title, lines, width=PANEL_WIDTH):
    # Prints a boxed summary
    inner = width - 4
    print(f"\n{C_CYAN}╭{'─'*(width-2)}╮{C_RESET}")
    print(f"{C_CYAN}│{C_RESET} {C_BOLD}{_clip(title, inner).center(inner)}{C_RESET} {C_CYAN}│{C_RESET}")
    print(f"{C_CYAN}├{'─'*(width-2)}┤{C_RESET}")
    for line in lines:
        print(f"{C_CYAN}│{C_RESET} {_clip(line, inner).ljust(inner)} {C_CYAN}│{C_RESET}")
    print(f"{C_CYAN}╰{'─'*(width-2)}╯{C_RESET}\n")
