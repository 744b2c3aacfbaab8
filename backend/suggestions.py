from typing import Dict, List

SUGGESTION_LIMIT = 5


def suggest_categories(frequencies: Dict[str, int], query: str, limit: int = SUGGESTION_LIMIT) -> List[str]:
    """
    Autocomplete previously searched categories.

    Categories containing the query (case-insensitive) are ranked by how often
    they were searched, ties broken alphabetically.
    """
    if not query or not query.strip():
        return []

    needle = query.strip().lower()
    matches = [category for category in frequencies if needle in category.lower()]
    matches.sort(key=lambda category: (-frequencies[category], category))
    return matches[:limit]
