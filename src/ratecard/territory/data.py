"""Built-in territory hierarchy.

Percentages are each region's share of global revenue. The figures are
editorial: children need not add up to their parent, so coverage is always
summed from the selected regions themselves.

``worldwide`` is a sentinel entry with no children; selecting it means full
coverage.
"""

from typing import Any


def _region(
    territory_id: str,
    name: str,
    percentage: str,
    tier: int,
    children: tuple[dict[str, Any], ...] = (),
) -> dict[str, Any]:
    return {
        "id": territory_id,
        "name": name,
        "percentage": percentage,
        "tier": tier,
        "children": children,
    }


DEFAULT_TERRITORY_DATA: tuple[dict[str, Any], ...] = (
    _region("worldwide", "Worldwide (All Territories)", "100", 1),
    _region(
        "north-america",
        "North America",
        "35",
        1,
        (
            _region(
                "usa",
                "United States",
                "30",
                1,
                (
                    _region("us-ca", "California", "7.28", 1),
                    _region("us-ny", "New York", "3.53", 1),
                    _region("us-fl", "Florida", "1.32", 1),
                    _region("us-tx", "Texas", "1.16", 1),
                    _region("us-tn", "Tennessee", "1.06", 1),
                    _region("us-pa", "Pennsylvania", "0.91", 1),
                    _region("us-il", "Illinois", "0.75", 1),
                    _region("us-ga", "Georgia", "0.68", 1),
                    _region("us-oh", "Ohio", "0.54", 1),
                    _region("us-nc", "North Carolina", "0.51", 1),
                    _region("us-nj", "New Jersey", "0.48", 1),
                    _region("us-va", "Virginia", "0.45", 1),
                    _region("us-wa", "Washington", "0.42", 1),
                    _region("us-ma", "Massachusetts", "0.39", 1),
                    _region("us-mi", "Michigan", "0.36", 1),
                    _region("us-co", "Colorado", "0.33", 1),
                    _region("us-az", "Arizona", "0.30", 1),
                    _region("us-md", "Maryland", "0.27", 1),
                    _region("us-in", "Indiana", "0.24", 1),
                    _region("us-mo", "Missouri", "0.21", 1),
                    _region("us-wi", "Wisconsin", "0.18", 1),
                    _region("us-mn", "Minnesota", "0.17", 1),
                    _region("us-or", "Oregon", "0.15", 1),
                    _region("us-sc", "South Carolina", "0.14", 1),
                    _region("us-al", "Alabama", "0.12", 1),
                    _region("us-la", "Louisiana", "0.11", 1),
                    _region("us-ky", "Kentucky", "0.11", 1),
                    _region("us-ct", "Connecticut", "0.10", 1),
                    _region("us-ok", "Oklahoma", "0.09", 1),
                    _region("us-ia", "Iowa", "0.08", 1),
                    _region("us-ut", "Utah", "0.08", 1),
                    _region("us-nv", "Nevada", "0.08", 1),
                    _region("us-ks", "Kansas", "0.07", 1),
                    _region("us-ar", "Arkansas", "0.06", 1),
                    _region("us-ms", "Mississippi", "0.06", 1),
                    _region("us-ne", "Nebraska", "0.05", 1),
                    _region("us-nm", "New Mexico", "0.05", 1),
                    _region("us-hi", "Hawaii", "0.05", 1),
                    _region("us-wv", "West Virginia", "0.04", 1),
                    _region("us-id", "Idaho", "0.04", 1),
                    _region("us-nh", "New Hampshire", "0.04", 1),
                    _region("us-me", "Maine", "0.03", 1),
                    _region("us-de", "Delaware", "0.03", 1),
                    _region("us-ri", "Rhode Island", "0.03", 1),
                    _region("us-mt", "Montana", "0.02", 1),
                    _region("us-sd", "South Dakota", "0.02", 1),
                    _region("us-nd", "North Dakota", "0.02", 1),
                    _region("us-ak", "Alaska", "0.02", 1),
                    _region("us-vt", "Vermont", "0.01", 1),
                    _region("us-wy", "Wyoming", "0.01", 1),
                ),
            ),
            _region("canada", "Canada", "5", 1),
        ),
    ),
    _region(
        "western-europe",
        "Western Europe",
        "25",
        2,
        (
            _region("uk", "United Kingdom", "8", 2),
            _region("germany", "Germany", "6", 2),
            _region("france", "France", "5", 2),
            _region("spain", "Spain", "3", 2),
            _region("italy", "Italy", "3", 2),
        ),
    ),
    _region(
        "asia-pacific-developed",
        "Asia-Pacific (Developed)",
        "20",
        3,
        (
            _region("japan", "Japan", "8", 3),
            _region("australia", "Australia", "5", 3),
            _region("south-korea", "South Korea", "4", 3),
            _region("singapore", "Singapore", "2", 3),
            _region("new-zealand", "New Zealand", "1", 3),
        ),
    ),
    _region(
        "latin-america",
        "Latin America",
        "10",
        4,
        (
            _region("brazil", "Brazil", "4", 4),
            _region("mexico", "Mexico", "3", 4),
            _region("argentina", "Argentina", "1.5", 4),
            _region("colombia", "Colombia", "0.75", 4),
            _region("chile", "Chile", "0.5", 4),
            _region("latam-other", "Rest of Latin America", "0.25", 4),
        ),
    ),
    _region(
        "asia-pacific-emerging",
        "Asia-Pacific (Emerging)",
        "6",
        4,
        (
            _region("china", "China", "3", 4),
            _region("india", "India", "2", 4),
            _region("indonesia", "Indonesia", "0.5", 4),
            _region("philippines", "Philippines", "0.25", 4),
            _region("thailand", "Thailand", "0.25", 4),
        ),
    ),
    _region(
        "middle-east-north-africa",
        "Middle East & North Africa",
        "2",
        5,
        (
            _region("uae-saudi", "UAE & Saudi Arabia", "1", 5),
            _region("turkey", "Turkey", "0.5", 5),
            _region("mena-other", "Rest of MENA", "0.5", 5),
        ),
    ),
    _region(
        "eastern-europe",
        "Eastern Europe",
        "1",
        5,
        (
            _region("poland", "Poland", "0.5", 5),
            _region("russia", "Russia", "0.25", 5),
            _region("eastern-europe-other", "Rest of Eastern Europe", "0.25", 5),
        ),
    ),
    _region(
        "africa",
        "Africa",
        "1",
        5,
        (
            _region("south-africa", "South Africa", "0.5", 5),
            _region("nigeria", "Nigeria", "0.25", 5),
            _region("africa-other", "Rest of Africa", "0.25", 5),
        ),
    ),
)
