"""Chart.js configurations for the missing-value and survival bar charts."""

from typing import Dict

import pandas as pd

from .analysis import group_by_feature

BAR_COLOR = "rgba(52,152,219,0.7)"

# (chart id, feature, title)
SURVIVAL_CHARTS = (
    ("sex",      "Sex",      "Survival by Sex"),
    ("pclass",   "Pclass",   "Survival by Pclass"),
    ("age",      "AgeGroup", "Survival by Age Group"),
    ("embarked", "Embarked", "Survival by Embarked"),
)


def missing_chart(profile: Dict[str, float]) -> dict:
    return {
        "type": "bar",
        "data": {
            "labels": list(profile),
            "datasets": [{"label": "% Missing", "data": list(profile.values())}],
        },
    }


def survival_chart(title: str, rates: Dict[str, float]) -> dict:
    """Bar chart of survival percentages with the y axis pinned to 0–100."""
    return {
        "type": "bar",
        "data": {
            "labels": list(rates),
            "datasets": [{
                "label": "% Survived",
                "data": list(rates.values()),
                "backgroundColor": BAR_COLOR,
            }],
        },
        "options": {
            "plugins": {"title": {"display": True, "text": title}},
            "scales": {"y": {"min": 0, "max": 100}},
        },
    }


def survival_charts(df: pd.DataFrame) -> Dict[str, dict]:
    """The four survival charts keyed by chart id; ``AgeGroup`` must already be derived."""
    return {
        chart_id: survival_chart(title, group_by_feature(df, feature))
        for chart_id, feature, title in SURVIVAL_CHARTS
    }
