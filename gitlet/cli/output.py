"""Terminal output helpers: colored status lines, log entries and status sections."""

from colorama import Fore, Style

BANNER_WIDTH = 44


def _banner() -> str:
    rule = f"{Fore.YELLOW}+{'-' * BANNER_WIDTH}+{Style.RESET_ALL}"
    rows = [
        f"{Fore.CYAN}{Style.BRIGHT}g i t l e t{Style.RESET_ALL}",
        f"{Fore.WHITE}snapshots, branches and three-way merges{Style.RESET_ALL}",
    ]
    lines = ['', rule]
    for row in rows:
        lines.append(f"{Fore.YELLOW}|{Style.RESET_ALL}  {row}")
    lines.append(rule)
    return '\n'.join(lines) + '\n'


BANNER = _banner()


def _paint(color: str, symbol: str, message: str) -> str:
    return f"{color}{symbol} {message}{Style.RESET_ALL}"


def success(message: str) -> str:
    """Green line for a completed action."""
    return _paint(Fore.GREEN, '✓', message)


def info(message: str) -> str:
    return _paint(Fore.CYAN, '→', message)


def warning(message: str) -> str:
    """Yellow line for outcomes that need the user's attention."""
    return _paint(Fore.YELLOW, '⚠', message)


def error(message: str) -> str:
    """Red line for a failed command."""
    return _paint(Fore.RED, '✗', message)


def format_commit(commit) -> str:
    """
    Render one commit as a log entry.

    ===
    commit <hash>
    Merge: <parent1[:7]> <parent2[:7]>   (merge commits only)
    Date: <weekday month day hh:mm:ss year zone>
    <message>
    """
    lines = ['===', f'commit {commit.hash}']
    if commit.is_merge:
        lines.append(f'Merge: {commit.parents[0][:7]} {commit.parents[1][:7]}')
    lines.append(f"Date: {commit.date.strftime('%a %b %d %H:%M:%S %Y %z')}")
    lines.append(commit.message)
    lines.append('')
    return '\n'.join(lines)


def format_section(title: str, entries) -> str:
    """Render a status section: '=== title ===' followed by one entry per line."""
    return '\n'.join([f'=== {title} ==='] + list(entries) + [''])
