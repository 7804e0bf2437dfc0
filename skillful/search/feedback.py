from skillful.search.models import ParsedQuery


def result_count_message(count: int) -> str:
    if count == 0:
        return "No matches found"
    if count == 1:
        return "Found 1 match"
    return f"Found {count} matches"


def generate_feedback(query: ParsedQuery, result_count: int) -> str:
    parts: list[str] = []
    if query.include:
        parts.append(f"Searching for: {', '.join(query.include)}")
    if query.has_exclusions:
        parts.append(f"Excluding: {', '.join(query.exclude)}")
    parts.append(result_count_message(result_count))
    return " | ".join(parts)


def list_all_feedback(total: int) -> str:
    noun = "skill" if total == 1 else "skills"
    return f"Listing all {total} {noun}"
