"""Summary: Known business name dictionary.

Importance: Supplies the brand names used for exact, fuzzy, and partial matching.
Alternatives: Resolve names through a places API at import time.

Keys are lowercase. Order matters: every matching stage returns the first entry
it finds, so earlier entries win ties.
"""

from __future__ import annotations

from types import MappingProxyType

from bizdetect.models import DictionaryEntry


KNOWN_BUSINESSES: tuple[DictionaryEntry, ...] = (
    # Grocery / Supermarket
    DictionaryEntry("iga", "grocery", 95),
    DictionaryEntry("metro", "grocery", 95),
    DictionaryEntry("super c", "grocery", 95),
    DictionaryEntry("provigo", "grocery", 95),
    DictionaryEntry("maxi", "grocery", 95),
    DictionaryEntry("costco", "grocery", 95),
    DictionaryEntry("walmart", "grocery", 95),
    DictionaryEntry("loblaws", "grocery", 95),
    DictionaryEntry("sobeys", "grocery", 90),
    DictionaryEntry("safeway", "grocery", 90),
    DictionaryEntry("food basics", "grocery", 90),
    DictionaryEntry("trader joes", "grocery", 90),
    DictionaryEntry("kroger", "grocery", 90),
    DictionaryEntry("publix", "grocery", 90),
    DictionaryEntry("aldi", "grocery", 90),
    DictionaryEntry("carrefour", "grocery", 90),
    DictionaryEntry("tesco", "grocery", 90),
    DictionaryEntry("lidl", "grocery", 90),
    DictionaryEntry("super u", "grocery", 90),
    DictionaryEntry("no frills", "grocery", 90),
    DictionaryEntry("foodland", "grocery", 90),
    DictionaryEntry("freshco", "grocery", 90),
    DictionaryEntry("target", "grocery", 90),
    DictionaryEntry("sams club", "grocery", 90),
    DictionaryEntry("food 4 less", "grocery", 90),
    DictionaryEntry("real canadian superstore", "grocery", 90),
    DictionaryEntry("marché adonis", "grocery", 90),
    DictionaryEntry("tt supermarket", "grocery", 90),
    DictionaryEntry("intermarché", "grocery", 90),
    DictionaryEntry("auchan", "grocery", 90),
    DictionaryEntry("eleclerc", "grocery", 90),
    DictionaryEntry("sainsburys", "grocery", 90),
    DictionaryEntry("waitrose", "grocery", 90),
    # Coffee / Café
    DictionaryEntry("starbucks", "coffee", 95),
    DictionaryEntry("tim hortons", "coffee", 95),
    DictionaryEntry("second cup", "coffee", 95),
    DictionaryEntry("café van houtte", "coffee", 95),
    DictionaryEntry("presse café", "coffee", 95),
    DictionaryEntry("dunkin", "coffee", 95),
    DictionaryEntry("peets coffee", "coffee", 95),
    DictionaryEntry("coffee bean & tea leaf", "coffee", 95),
    DictionaryEntry("caffè nero", "coffee", 95),
    DictionaryEntry("costa coffee", "coffee", 95),
    DictionaryEntry("mccafé", "coffee", 95),
    DictionaryEntry("gloria jeans", "coffee", 95),
    DictionaryEntry("café dépôt", "coffee", 95),
    DictionaryEntry("café olimpico", "coffee", 95),
    DictionaryEntry("café st-henri", "coffee", 95),
    DictionaryEntry("café riccardo", "coffee", 95),
    DictionaryEntry("bridgehead", "coffee", 95),
    DictionaryEntry("balzacs coffee roasters", "coffee", 95),
    # Pharmacy / Drugstore
    DictionaryEntry("jean coutu", "pharmacy", 95),
    DictionaryEntry("jean-coutu", "pharmacy", 95),
    DictionaryEntry("jc", "pharmacy", 95),
    DictionaryEntry("pharmaprix", "pharmacy", 95),
    DictionaryEntry("shoppers drug mart", "pharmacy", 95),
    DictionaryEntry("uniprix", "pharmacy", 95),
    DictionaryEntry("upx", "pharmacy", 95),
    DictionaryEntry("familiprix", "pharmacy", 95),
    DictionaryEntry("fm", "pharmacy", 95),
    DictionaryEntry("brunet", "pharmacy", 95),
    DictionaryEntry("rexall", "pharmacy", 95),
    DictionaryEntry("guardian", "pharmacy", 95),
    DictionaryEntry("london drugs", "pharmacy", 95),
    DictionaryEntry("walgreens", "pharmacy", 95),
    DictionaryEntry("cvs pharmacy", "pharmacy", 95),
    DictionaryEntry("boots", "pharmacy", 95),
    DictionaryEntry("watsons", "pharmacy", 95),
    DictionaryEntry("wellca", "pharmacy", 95),
    DictionaryEntry("dis-chem", "pharmacy", 95),
    DictionaryEntry("apotex", "pharmacy", 95),
    DictionaryEntry("pharmachoice", "pharmacy", 95),
    # Gym / Fitness / Sports
    DictionaryEntry("éconofitness", "gym", 95),
    DictionaryEntry("econofitness", "gym", 95),
    DictionaryEntry("goodlife fitness", "gym", 95),
    DictionaryEntry("anytime fitness", "gym", 95),
    DictionaryEntry("planet fitness", "gym", 95),
    DictionaryEntry("orangetheory fitness", "gym", 95),
    DictionaryEntry("ymca", "gym", 95),
    DictionaryEntry("nautilus plus", "gym", 95),
    DictionaryEntry("golds gym", "gym", 95),
    DictionaryEntry("crunch fitness", "gym", 95),
    DictionaryEntry("énergie cardio", "gym", 95),
    DictionaryEntry("crossfit", "gym", 95),
    DictionaryEntry("la fitness", "gym", 95),
    DictionaryEntry("snap fitness", "gym", 95),
    DictionaryEntry("club sportif maa", "gym", 95),
    DictionaryEntry("f45 training", "gym", 95),
    DictionaryEntry("equinox", "gym", 95),
    DictionaryEntry("24 hour fitness", "gym", 95),
    DictionaryEntry("fitplus", "gym", 95),
    DictionaryEntry("world gym", "gym", 95),
    DictionaryEntry("econo gym", "gym", 95),
    DictionaryEntry("curves", "gym", 95),
    # Restaurant / Fast Food
    DictionaryEntry("mcdonalds", "restaurant", 95),
    DictionaryEntry("burger king", "restaurant", 95),
    DictionaryEntry("aw", "restaurant", 95),
    DictionaryEntry("harveys", "restaurant", 95),
    DictionaryEntry("wendys", "restaurant", 95),
    DictionaryEntry("subway", "restaurant", 95),
    DictionaryEntry("kfc", "restaurant", 95),
    DictionaryEntry("pfk", "restaurant", 95),
    DictionaryEntry("pizza hut", "restaurant", 95),
    DictionaryEntry("dominos", "restaurant", 95),
    DictionaryEntry("popeyes", "restaurant", 95),
    DictionaryEntry("taco bell", "restaurant", 95),
    DictionaryEntry("chipotle", "restaurant", 95),
    DictionaryEntry("nandos", "restaurant", 95),
    DictionaryEntry("boston pizza", "restaurant", 95),
    DictionaryEntry("st-hubert", "restaurant", 95),
    DictionaryEntry("la belle & la bœuf", "restaurant", 95),
    DictionaryEntry("montanas", "restaurant", 95),
    DictionaryEntry("scores", "restaurant", 95),
    DictionaryEntry("benny & co", "restaurant", 95),
    DictionaryEntry("dennys", "restaurant", 95),
    DictionaryEntry("chilis", "restaurant", 95),
    DictionaryEntry("five guys", "restaurant", 95),
    DictionaryEntry("shake shack", "restaurant", 95),
    DictionaryEntry("olive garden", "restaurant", 95),
    DictionaryEntry("pizza pizza", "restaurant", 95),
    DictionaryEntry("la belle province", "restaurant", 95),
    # Convenience Store / Dépanneur
    DictionaryEntry("couche-tard", "convenience", 95),
    DictionaryEntry("7-eleven", "convenience", 95),
    DictionaryEntry("shell select", "convenience", 95),
    DictionaryEntry("on the run", "convenience", 95),
    # Bakery / Pâtisserie
    DictionaryEntry("au pain doré", "bakery", 95),
    DictionaryEntry("première moisson", "bakery", 95),
    DictionaryEntry("bennys bakery", "bakery", 95),
    DictionaryEntry("pa boulangerie", "bakery", 95),
    DictionaryEntry("la baguette", "bakery", 95),
    DictionaryEntry("cobs bread", "bakery", 95),
    DictionaryEntry("panera bread", "bakery", 95),
    DictionaryEntry("paul", "bakery", 95),
    DictionaryEntry("le pain quotidien", "bakery", 95),
    DictionaryEntry("boulangerie ange", "bakery", 95),
    # Bar / Pub / Nightlife
    DictionaryEntry("les 3 brasseurs", "bar", 95),
    DictionaryEntry("archibald", "bar", 95),
    DictionaryEntry("saint-bock", "bar", 95),
    DictionaryEntry("baton rouge", "bar", 95),
    DictionaryEntry("milestones", "bar", 95),
    DictionaryEntry("jack astors", "bar", 95),
    DictionaryEntry("irish pub", "bar", 95),
    DictionaryEntry("brewdog", "bar", 95),
    DictionaryEntry("heineken bar", "bar", 95),
    DictionaryEntry("hoegaarden pub", "bar", 95),
    # Shopping / Clothing / Retail
    DictionaryEntry("winners", "shopping", 95),
    DictionaryEntry("marshalls", "shopping", 95),
    DictionaryEntry("hudsons bay", "shopping", 95),
    DictionaryEntry("la baie", "shopping", 95),
    DictionaryEntry("simons", "shopping", 95),
    DictionaryEntry("hm", "shopping", 95),
    DictionaryEntry("zara", "shopping", 95),
    DictionaryEntry("uniqlo", "shopping", 95),
    DictionaryEntry("old navy", "shopping", 95),
    DictionaryEntry("gap", "shopping", 95),
    DictionaryEntry("aritzia", "shopping", 95),
    DictionaryEntry("ardene", "shopping", 95),
    DictionaryEntry("sport chek", "shopping", 95),
    DictionaryEntry("lululemon", "shopping", 95),
    DictionaryEntry("decathlon", "shopping", 95),
    DictionaryEntry("roots", "shopping", 95),
    DictionaryEntry("nike", "shopping", 95),
    DictionaryEntry("adidas", "shopping", 95),
    DictionaryEntry("under armour", "shopping", 95),
    DictionaryEntry("reitmans", "shopping", 95),
    DictionaryEntry("le château", "shopping", 95),
    # Bank / ATM / Finance
    DictionaryEntry("rbc", "bank", 95),
    DictionaryEntry("td", "bank", 95),
    DictionaryEntry("scotiabank", "bank", 95),
    DictionaryEntry("bmo", "bank", 95),
    DictionaryEntry("cibc", "bank", 95),
    DictionaryEntry("desjardins", "bank", 95),
    DictionaryEntry("national bank", "bank", 95),
    DictionaryEntry("laurentian bank", "bank", 95),
    DictionaryEntry("hsbc", "bank", 95),
    DictionaryEntry("capital one", "bank", 95),
    DictionaryEntry("chase", "bank", 95),
    DictionaryEntry("wells fargo", "bank", 95),
    DictionaryEntry("bank of america", "bank", 95),
    DictionaryEntry("citibank", "bank", 95),
    DictionaryEntry("santander", "bank", 95),
    DictionaryEntry("barclays", "bank", 95),
    # Hotel / Accommodation
    DictionaryEntry("hilton", "hotel", 95),
    DictionaryEntry("marriott", "hotel", 95),
    DictionaryEntry("best western", "hotel", 95),
    DictionaryEntry("holiday inn", "hotel", 95),
    DictionaryEntry("fairmont", "hotel", 95),
    DictionaryEntry("days inn", "hotel", 95),
    DictionaryEntry("comfort inn", "hotel", 95),
    DictionaryEntry("super 8", "hotel", 95),
    DictionaryEntry("motel 6", "hotel", 95),
    DictionaryEntry("sheraton", "hotel", 95),
    DictionaryEntry("four seasons", "hotel", 95),
    DictionaryEntry("hôtel le germain", "hotel", 95),
    DictionaryEntry("delta hotels", "hotel", 95),
    DictionaryEntry("hyatt", "hotel", 95),
    DictionaryEntry("novotel", "hotel", 95),
    DictionaryEntry("ibis", "hotel", 95),
    # Gas Station / Car Service
    DictionaryEntry("shell", "gas", 95),
    DictionaryEntry("esso", "gas", 95),
    DictionaryEntry("petro-canada", "gas", 95),
    DictionaryEntry("ultramar", "gas", 95),
    DictionaryEntry("irving", "gas", 95),
    DictionaryEntry("chevron", "gas", 95),
    DictionaryEntry("mobil", "gas", 95),
    DictionaryEntry("total", "gas", 95),
    DictionaryEntry("bp", "gas", 95),
    DictionaryEntry("texaco", "gas", 95),
    DictionaryEntry("circle k", "gas", 95),
    # Hospital / Clinic / Dentist
    DictionaryEntry("chum", "hospital", 95),
    DictionaryEntry("cusm", "hospital", 95),
    DictionaryEntry("mayo clinic", "hospital", 95),
    DictionaryEntry("cleveland clinic", "hospital", 95),
    DictionaryEntry("sunnybrook", "hospital", 95),
    DictionaryEntry("hôpital sainte-justine", "hospital", 95),
    DictionaryEntry("clinique dentaire", "hospital", 95),
    DictionaryEntry("medisys", "hospital", 95),
    DictionaryEntry("rockland md", "hospital", 95),
    # School / University
    DictionaryEntry("université de montréal", "school", 95),
    DictionaryEntry("mcgill", "school", 95),
    DictionaryEntry("concordia", "school", 95),
    DictionaryEntry("polytechnique montréal", "school", 95),
    DictionaryEntry("hec montréal", "school", 95),
    DictionaryEntry("université laval", "school", 95),
    DictionaryEntry("uqam", "school", 95),
    DictionaryEntry("université de sherbrooke", "school", 95),
    DictionaryEntry("harvard", "school", 95),
    DictionaryEntry("mit", "school", 95),
    DictionaryEntry("stanford", "school", 95),
    DictionaryEntry("uoft", "school", 95),
    DictionaryEntry("ubc", "school", 95),
    # Library / Bookstore
    DictionaryEntry("renaud-bray", "library", 95),
    DictionaryEntry("indigo", "library", 95),
    DictionaryEntry("chapters", "library", 95),
    DictionaryEntry("archambault", "library", 95),
    DictionaryEntry("amazon books", "library", 95),
    DictionaryEntry("waterstones", "library", 95),
    DictionaryEntry("fnac", "library", 95),
    DictionaryEntry("barnes & noble", "library", 95),
    # Park / Nature / Trail
    DictionaryEntry("parc du mont-orford", "park", 95),
    DictionaryEntry("parc de la mauricie", "park", 95),
    DictionaryEntry("yosemite", "park", 95),
    DictionaryEntry("banff", "park", 95),
    DictionaryEntry("parc lafontaine", "park", 95),
    DictionaryEntry("parc mont-royal", "park", 95),
    DictionaryEntry("jasper", "park", 95),
    DictionaryEntry("yellowstone", "park", 95),
    # Airport / Transportation
    DictionaryEntry("yul", "transportation", 95),
    DictionaryEntry("yyz", "transportation", 95),
    DictionaryEntry("yvr", "transportation", 95),
    DictionaryEntry("air canada", "transportation", 95),
    DictionaryEntry("westjet", "transportation", 95),
    DictionaryEntry("porter", "transportation", 95),
    DictionaryEntry("united airlines", "transportation", 95),
    DictionaryEntry("delta", "transportation", 95),
    DictionaryEntry("air france", "transportation", 95),
    DictionaryEntry("lufthansa", "transportation", 95),
    DictionaryEntry("via rail", "transportation", 95),
    DictionaryEntry("amtrak", "transportation", 95),
    # Organic Grocery / Bio
    DictionaryEntry("avril", "organic_grocery", 95),
    DictionaryEntry("rachelle béry", "organic_grocery", 95),
    DictionaryEntry("la moisson", "organic_grocery", 95),
    DictionaryEntry("whole foods", "organic_grocery", 95),
    DictionaryEntry("biocoop", "organic_grocery", 95),
    DictionaryEntry("naturalia", "organic_grocery", 95),
    DictionaryEntry("bulk barn", "organic_grocery", 90),
    DictionaryEntry("zero waste", "organic_grocery", 90),
    # Herbal Shop / Herboristerie
    DictionaryEntry("herboristerie la maria", "herbal_shop", 95),
    DictionaryEntry("gaia herbs", "herbal_shop", 95),
    DictionaryEntry("new roots herbal", "herbal_shop", 95),
    DictionaryEntry("herboristerie", "herbal_shop", 95),
    DictionaryEntry("naturopathie", "herbal_shop", 90),
    DictionaryEntry("plantes", "herbal_shop", 85),
    DictionaryEntry("tisanes", "herbal_shop", 85),
    DictionaryEntry("huiles essentielles", "herbal_shop", 85),
    DictionaryEntry("suppléments", "herbal_shop", 85),
    # Health Café / Café Santé
    DictionaryEntry("leaves house", "health_cafe", 95),
    DictionaryEntry("mandys", "health_cafe", 95),
    DictionaryEntry("freshii", "health_cafe", 95),
    DictionaryEntry("booster juice", "health_cafe", 95),
    DictionaryEntry("bar à jus", "health_cafe", 90),
    DictionaryEntry("smoothie", "health_cafe", 85),
    DictionaryEntry("matcha", "health_cafe", 85),
    DictionaryEntry("kombucha", "health_cafe", 85),
    DictionaryEntry("vegan", "health_cafe", 80),
    # Farmers Market / Marché Fermier
    DictionaryEntry("marché jean-talon", "farmers_market", 95),
    DictionaryEntry("miel danicet", "farmers_market", 95),
    DictionaryEntry("borough market", "farmers_market", 95),
    DictionaryEntry("marché fermier", "farmers_market", 95),
    DictionaryEntry("producteur local", "farmers_market", 90),
    DictionaryEntry("fromagerie", "farmers_market", 85),
    DictionaryEntry("miel", "farmers_market", 85),
    DictionaryEntry("artisanal", "farmers_market", 80),
)

BUSINESS_LOOKUP = MappingProxyType({entry.name: entry for entry in KNOWN_BUSINESSES})
