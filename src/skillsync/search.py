"""Keyword search over the component catalog."""

from dataclasses import dataclass

from skillsync import registry
from skillsync.models.component import COMPONENT_TYPES, Component, ComponentType


@dataclass(frozen=True)
class SearchHit:
    component: Component
    score: int


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def match_score(query: str, name: str, description: str) -> int:
    """Score how well query matches a name/description pair; 0 means no match."""
    query = query.lower()
    name = name.lower()
    if name == query:
        return 100
    if name.startswith(query):
        return 80
    if query in name:
        return 60
    if description and query in description.lower():
        return 40
    distance = levenshtein(query, name)
    if distance <= 2 and distance < len(name) // 2:
        return 30 - distance * 5
    return 0


def _score_component(query: str, component: Component) -> int:
    score = match_score(query, component.name, component.description)
    if score == 0:
        for tag in component.tags:
            score = match_score(query, tag, "")
            if score:
                break
    return score


def search(query: str, component_type: ComponentType | None = None) -> list[SearchHit]:
    """Find components matching query, best matches first."""
    types = COMPONENT_TYPES if component_type is None else (component_type,)
    hits: list[SearchHit] = []
    for current_type in types:
        for component in registry.all_components(current_type):
            score = _score_component(query, component)
            if score > 0:
                hits.append(SearchHit(component=component, score=score))
    return sorted(hits, key=lambda hit: (-hit.score, hit.component.name))
