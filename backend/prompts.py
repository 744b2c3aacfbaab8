NAMES_PER_REQUEST = 30
MAX_NAME_LETTERS = 8

GENERATION_PROMPT = """Suggest {count} very short (max {max_letters} letters), unique, and attractive brand names for a {category} startup.
Each name must also include a short and meaningful explanation in this format:
Name - Meaning
Example:
Nuvia - Fresh and new beginnings
Make sure the names are unique and do not repeat. Put one name per line."""


def build_generation_prompt(category: str, count: int = NAMES_PER_REQUEST, max_letters: int = MAX_NAME_LETTERS) -> str:
    return GENERATION_PROMPT.format(
        count=count,
        max_letters=max_letters,
        category=category.strip(),
    )
