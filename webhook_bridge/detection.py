from .constants import COLOR_GRAY, SEVERITY_COLORS, SEVERITY_NAMES, UNKNOWN_SEVERITY_NAME


def get_severity_name(severity: str) -> str:
    return SEVERITY_NAMES.get((severity or "").lower(), UNKNOWN_SEVERITY_NAME)


def get_severity_color(severity: str) -> str:
    # Tokens fora de 0-6 (incluindo "unknown") caem no cinza
    return SEVERITY_COLORS.get((severity or "").lower(), COLOR_GRAY)
