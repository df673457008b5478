# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_yes_no(value: bool) -> str:
    return "Yes" if value else "No"


# === number formatters ===


def format_gpa(gpa: float) -> str:
    return f"{gpa:.2f}"


def format_percentage(percentage: float) -> str:
    return f"{percentage:g}%"
