"""Summary: Substring tables for obvious-pattern and keyword matching.

Importance: Lets the classifier recognise independent businesses by what they sell.
Alternatives: Train a statistical model on labelled marker names.
"""

from __future__ import annotations

from bizdetect.models import KeywordPattern, ObviousPattern


# Grocery entries come first so a grocery store with a café counter stays grocery.
# Reordering this list changes results for mixed-use venues.
OBVIOUS_PATTERNS: tuple[ObviousPattern, ...] = (
    ObviousPattern("épicerie", "grocery"),
    ObviousPattern("fruiterie", "grocery"),
    ObviousPattern("supermarché", "grocery"),
    ObviousPattern("supermarket", "grocery"),
    ObviousPattern("grocery", "grocery"),
    ObviousPattern("café", "coffee"),
    ObviousPattern("coffee", "coffee"),
    ObviousPattern("pharmacie", "pharmacy"),
    ObviousPattern("pharmacy", "pharmacy"),
    ObviousPattern("restaurant", "restaurant"),
    ObviousPattern("resto", "restaurant"),
    ObviousPattern("boulangerie", "bakery"),
    ObviousPattern("bakery", "bakery"),
    ObviousPattern("gym", "gym"),
    ObviousPattern("fitness", "gym"),
    ObviousPattern("bank", "bank"),
    ObviousPattern("banque", "bank"),
    ObviousPattern("hotel", "hotel"),
    ObviousPattern("hôtel", "hotel"),
    ObviousPattern("école", "school"),
    ObviousPattern("school", "school"),
    ObviousPattern("université", "school"),
    ObviousPattern("university", "school"),
    ObviousPattern("bibliothèque", "library"),
    ObviousPattern("library", "library"),
    ObviousPattern("hôpital", "hospital"),
    ObviousPattern("hospital", "hospital"),
    ObviousPattern("parc", "park"),
    ObviousPattern("park", "park"),
    ObviousPattern("bio", "organic_grocery"),
    ObviousPattern("organic", "organic_grocery"),
    ObviousPattern("herboristerie", "herbal_shop"),
    ObviousPattern("herbal", "herbal_shop"),
    ObviousPattern("bar à jus", "health_cafe"),
    ObviousPattern("juice bar", "health_cafe"),
    ObviousPattern("marché fermier", "farmers_market"),
    ObviousPattern("farmers market", "farmers_market"),
)

# English and French keywords per category, scanned in table order.
KEYWORD_PATTERNS: tuple[KeywordPattern, ...] = (
    KeywordPattern(
        "grocery",
        (
            "grocery", "supermarket", "market", "food", "superstore", "wholesale",
            "fresh", "coop", "store", "bazaar", "mart", "épicerie", "fruiterie",
            "supermarché", "alimentation", "marché", "coop", "magasin",
            "produits alimentaires",
        ),
        90,
    ),
    KeywordPattern(
        "coffee",
        (
            "coffee", "espresso", "latte", "brew", "cappuccino", "tea", "barista",
            "roaster", "coffeehouse", "café", "thé", "espresso", "latte", "moka",
            "brûlerie", "torréfacteur", "infusion",
        ),
        95,
    ),
    KeywordPattern(
        "pharmacy",
        (
            "pharmacy", "drugstore", "health", "wellness", "medical", "clinic",
            "prescription", "drug", "care", "pharmacie", "santé", "bien-être",
            "médicament", "clinique", "ordonnance",
        ),
        90,
    ),
    KeywordPattern(
        "gym",
        (
            "gym", "fitness", "training", "workout", "sport", "exercise", "wellness",
            "crossfit", "yoga", "club", "remise en forme", "entrainement", "sport",
            "exercice", "musculation", "cardio", "yoga", "centre sportif",
        ),
        85,
    ),
    KeywordPattern(
        "restaurant",
        (
            "restaurant", "food", "eatery", "bistro", "grill", "burger", "pizza",
            "sushi", "bar", "pub", "diner", "resto", "bistro", "brasserie", "pizzeria",
            "grill", "bar", "pub", "cantine", "sandwicherie",
        ),
        80,
    ),
    KeywordPattern(
        "convenience",
        (
            "convenience", "corner store", "mini mart", "gas", "fuel", "snack",
            "quick stop", "service station", "dépanneur", "station-service", "essence",
            "magasin de proximité", "boutique", "snack", "station",
        ),
        85,
    ),
    KeywordPattern(
        "bakery",
        (
            "bakery", "bakehouse", "bread", "pastry", "patisserie", "boulangerie",
            "bagel", "croissant", "dessert", "boulangerie", "pâtisserie", "pain",
            "viennoiserie", "dessert", "croissant", "gâteau",
        ),
        90,
    ),
    KeywordPattern(
        "bar",
        (
            "bar", "pub", "tavern", "brewery", "beer", "club", "cocktail", "wine",
            "taproom", "bar", "pub", "brasserie", "bière", "cocktail", "vins",
            "soirée", "taverne", "microbrasserie",
        ),
        85,
    ),
    KeywordPattern(
        "shopping",
        (
            "mall", "store", "boutique", "shop", "retail", "fashion", "clothing",
            "apparel", "outlet", "magasin", "boutique", "centre commercial",
            "vêtements", "mode", "détaillant",
        ),
        75,
    ),
    KeywordPattern(
        "bank",
        (
            "bank", "atm", "credit", "finance", "trust", "financial", "deposit",
            "branch", "banque", "guichet", "crédit", "finance", "caisse", "succursale",
            "dépôt",
        ),
        85,
    ),
    KeywordPattern(
        "hotel",
        (
            "hotel", "motel", "inn", "resort", "lodge", "bnb", "hostel",
            "accommodation", "stay", "hôtel", "motel", "auberge", "gîte",
            "hébergement", "chalet", "resort",
        ),
        90,
    ),
    KeywordPattern(
        "gas",
        (
            "gas", "station", "fuel", "petrol", "service", "garage", "auto", "car wash",
            "repair", "station-service", "essence", "garage", "voiture", "automobile",
            "réparation", "lavage auto",
        ),
        85,
    ),
    KeywordPattern(
        "hospital",
        (
            "hospital", "clinic", "medical", "doctor", "dentist", "emergency",
            "urgent care", "hôpital", "clinique", "médecin", "dentiste", "urgence",
            "soins", "centre médical",
        ),
        90,
    ),
    KeywordPattern(
        "school",
        (
            "school", "college", "university", "academy", "campus", "education",
            "institute", "école", "collège", "université", "académie", "campus",
            "formation", "institut",
        ),
        85,
    ),
    KeywordPattern(
        "library",
        (
            "library", "bookstore", "books", "reading", "literature", "novel",
            "librairie", "bibliothèque", "livres", "lecture", "roman",
        ),
        90,
    ),
    KeywordPattern(
        "park",
        (
            "park", "trail", "forest", "nature", "hiking", "camping", "reserve", "parc",
            "sentier", "forêt", "nature", "randonnée", "camping", "réserve",
        ),
        85,
    ),
    KeywordPattern(
        "transportation",
        (
            "airport", "terminal", "flight", "airlines", "travel", "aeroport",
            "station", "bus", "metro", "train", "aéroport", "terminal", "vol",
            "compagnie aérienne", "voyage", "station", "gare", "train", "métro",
        ),
        85,
    ),
    KeywordPattern(
        "organic_grocery",
        (
            "bio", "en vrac", "local", "zéro déchet", "naturel", "santé", "coop",
            "écoresponsable", "ferme", "organic", "bulk", "zero waste", "eco",
            "natural", "farm", "sustainable",
        ),
        90,
    ),
    KeywordPattern(
        "herbal_shop",
        (
            "herboristerie", "naturopathie", "plantes", "tisanes",
            "huiles essentielles", "suppléments", "herbal", "apothecary", "naturopath",
            "supplements", "vitamins", "essential oils",
        ),
        90,
    ),
    KeywordPattern(
        "health_cafe",
        (
            "café", "bar à jus", "smoothie", "matcha", "kombucha", "bio", "vegan",
            "coffee", "juice bar", "smoothie", "matcha", "kombucha", "organic coffee",
        ),
        85,
    ),
    KeywordPattern(
        "farmers_market",
        (
            "ferme", "marché", "producteur local", "fromagerie", "miel", "artisanal",
            "farm", "farmers market", "local produce", "cheese", "honey", "artisan",
        ),
        90,
    ),
)
