"""Headline templates and metric ranges for generated business data.

Templates are ``str.format`` patterns over ``name``, ``location`` and
``year``. The two families share no entries so that a regenerated
headline never comes from the pool used for the initial one.
"""

RECORD_HEADLINE_TEMPLATES: tuple[str, ...] = (
    "Why {name} is {location}'s Best-Kept Secret in {year}",
    "{name}: The {location} Gem Everyone's Talking About",
    "How {name} Became {location}'s Most Trusted Local Business",
    "{name} - Where {location} Meets Excellence",
    "The Ultimate Guide to {name}: {location}'s Rising Star",
    "{name} Sets the Standard for Quality in {location}",
    "Discover Why {name} is {location}'s Hidden Treasure",
    "{name}: Transforming the {location} Business Landscape",
)

REGENERATED_HEADLINE_TEMPLATES: tuple[str, ...] = (
    "{name}: The Future of {location}'s Business Scene",
    "Breaking: {name} Revolutionizes {location} Market",
    "{name} - Your Next Favorite {location} Destination",
    "Why Smart {location} Residents Choose {name}",
    "{name}: Excellence Redefined in {location}",
    "The {name} Phenomenon Taking {location} by Storm",
    "From {location} with Love: The {name} Story",
    "{name} - Where Innovation Meets Tradition in {location}",
    "{location}'s Best Investment? {name} Delivers",
    "{name}: Setting New Standards in {location}",
    "The {name} Experience: {location}'s Premium Choice",
    "{name} - Proudly Serving {location} Since Day One",
)

MIN_RATING = 3.8
MAX_RATING = 4.9

# Inclusive (low, high) bounds. A band is picked first, then a count inside it.
REVIEW_BANDS: tuple[tuple[int, int], ...] = (
    (25, 75),
    (76, 150),
    (151, 300),
    (301, 500),
)
