# Lifestyle presets. Costs are monthly except travel, which is per year.
# These are tongue-in-cheek anchors, not price data; users add their own.
import re
import time
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

CATEGORIES = ("housing", "groceries", "car", "leisure", "travel")
ANNUAL_CATEGORIES = {"travel"}

CATEGORY_LABELS = {
    "housing": "Housing",
    "groceries": "Groceries",
    "car": "Cars & Transport",
    "leisure": "Leisure & Entertainment",
    "travel": "Travel (Annual)",
}


@dataclass(frozen=True)
class Preset:
    id: str
    label: str
    cost: float
    category: str
    is_custom: bool = False
    icon_url: Optional[str] = None

    @property
    def is_annual(self) -> bool:
        return self.category in ANNUAL_CATEGORIES

    @property
    def monthly_cost(self) -> float:
        return self.cost / 12 if self.is_annual else self.cost


def _group(category: str, rows) -> List[Preset]:
    return [Preset(id=pid, label=label, cost=cost, category=category) for pid, label, cost in rows]


PRESETS: Dict[str, List[Preset]] = {
    "housing": _group("housing", [
        ("mansion", "Mansion", 25_000),
        ("house", "Suburban House", 3_500),
        ("apartment", "Downtown Apartment", 2_500),
        ("studio", "Studio Apartment", 1_600),
        ("room", "Renting a Room", 900),
        ("shed", "Garden Shed", 150),
        ("homeless", "Living with Parents", 0),
    ]),
    "groceries": _group("groceries", [
        ("gourmet", "Gourmet / Organic", 1_200),
        ("standard", "Standard Diet", 600),
        ("budget", "Budget Eating", 350),
        ("ramen", "Instant Noodle Diet", 100),
        ("no-eating", "Fasting / No Eating", 0),
    ]),
    "car": _group("car", [
        ("supercar", "Supercar", 3_500),
        ("suv", "Luxury SUV", 1_200),
        ("sedan", "Reliable Sedan", 550),
        ("public-transport", "Public Transport", 100),
        ("bicycle", "Bicycle", 20),
    ]),
    "leisure": _group("leisure", [
        ("fine-dining", "Fine Dining & Clubs", 1_500),
        ("clubbing", "Going Out / Bars", 600),
        ("movies", "Movies & Takeout", 300),
        ("hobbies", "Hobbies", 150),
        ("stay-home", "Netflix & Chill", 50),
        ("no-fun", "No Fun Allowed", 0),
    ]),
    "travel": _group("travel", [
        ("globetrotting", "Luxury Globe-trotting", 25_000),
        ("resort", "All-inclusive Resort", 8_000),
        ("road-trip", "Several Road Trips", 4_000),
        ("camping", "Weekend Camping", 1_500),
        ("staycation", "Staycation", 500),
    ]),
}

# Ad-hoc monthly costs offered in the "other costs" picker
OTHER_COST_PRESETS: List[Preset] = _group("other", [
    ("other-student-loans", "Student Loans", 450),
    ("other-gym", "Gym Membership", 50),
    ("other-subscriptions", "Subscriptions (Streaming, etc.)", 40),
    ("other-pet-care", "Pet Care / Insurance", 100),
    ("other-childcare", "Childcare", 1_200),
    ("other-personal-care", "Personal Care (Haircuts, etc.)", 75),
    ("other-charity", "Charity Donations", 100),
])


def find_preset(presets: List[Preset], preset_id: str) -> Optional[Preset]:
    for p in presets:
        if p.id == preset_id:
            return p
    return None


def catalog_with_custom(custom: Dict[str, List[Preset]], base: Dict[str, List[Preset]] = None):
    """
    Defaults first, then custom presets per category.
    A custom preset whose id is already in the category is skipped (first one wins).
    """
    base = PRESETS if base is None else base
    out = {}
    for cat in CATEGORIES:
        merged = list(base.get(cat, []))
        seen = {p.id for p in merged}
        for p in custom.get(cat, []):
            if p.id in seen:
                continue
            merged.append(p)
            seen.add(p.id)
        out[cat] = merged
    return out


def custom_only(catalog: Dict[str, List[Preset]]) -> List[Preset]:
    return [p for cat in CATEGORIES for p in catalog.get(cat, []) if p.is_custom]


def _slug(label: str) -> str:
    return re.sub(r"\s+", "-", label.lower())


def new_custom_preset(category: str, label: str, cost, icon_url: str = None, now_ms: int = None) -> Preset:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category!r}")
    if not label or cost is None or cost == "":
        raise ValueError("Please fill out all fields with valid values.")
    now_ms = int(time.time() * 1000) if now_ms is None else now_ms
    return Preset(
        id=f"{category}-{_slug(label)}-{now_ms}",
        label=label,
        cost=float(cost),
        category=category,
        is_custom=True,
        icon_url=icon_url or f"https://placehold.co/100x100/e2e8f0/64748b?text={label[0]}",
    )


def combined_other_cost_presets(catalog: Dict[str, List[Preset]]) -> List[Preset]:
    """
    Everything the "other costs" picker can offer: the dedicated other-cost presets
    plus every lifestyle preset, with travel shown as a monthly average.
    Duplicate labels collapse to the last entry; result is sorted by label.
    """
    lifestyle = []
    for cat in CATEGORIES:
        for p in catalog.get(cat, []):
            if p.is_annual:
                p = replace(p, cost=p.cost / 12, label=f"{p.label} (Avg/Mo)")
            lifestyle.append(p)

    by_label: Dict[str, Preset] = {}
    for p in OTHER_COST_PRESETS + lifestyle:
        by_label[p.label] = p
    return sorted(by_label.values(), key=lambda p: p.label.casefold())


def search_presets(presets: List[Preset], term: str) -> List[Preset]:
    term = (term or "").lower()
    return [p for p in presets if term in p.label.lower()]
