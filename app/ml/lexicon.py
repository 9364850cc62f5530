"""
Sentiment lexicons for movie reviews.

The word sets are built once at import time and never mutated, so they can be
shared freely between concurrent requests. Every entry is a normalized token:
lowercase letters and digits only, exactly as produced by
`app.ml.rule_based.tokenize`.
"""

POSITIVE_WORDS = frozenset(
    {
        "excellent", "amazing", "wonderful", "fantastic", "great", "good",
        "awesome", "brilliant", "outstanding", "superb", "marvelous",
        "incredible", "spectacular", "magnificent", "perfect", "beautiful",
        "lovely", "enjoyable", "entertaining", "compelling", "engaging",
        "captivating", "thrilling", "exciting", "inspiring", "uplifting",
        "heartwarming", "touching", "moving", "impressive", "remarkable",
        "extraordinary", "phenomenal", "stellar", "love", "adore", "like",
        "enjoy", "appreciate", "recommend", "praise", "applaud", "masterpiece",
        "gem", "treasure", "classic", "timeless", "unforgettable", "memorable",
        "hilarious", "funny", "witty", "clever", "smart", "genius", "talented",
        "skilled",
    }
)

NEGATIVE_WORDS = frozenset(
    {
        "terrible", "awful", "horrible", "bad", "poor", "worst", "hate",
        "dislike", "boring", "dull", "tedious", "slow", "confusing", "stupid",
        "ridiculous", "absurd", "disappointing", "frustrating", "annoying",
        "irritating", "unpleasant", "uncomfortable", "disgusting", "repulsive",
        "offensive", "disturbing", "shocking", "appalling", "pathetic", "lame",
        "weak", "mediocre", "subpar", "inferior", "flawed", "failed", "waste",
        "disaster", "mess", "garbage", "trash", "junk", "crap", "nonsense",
        "overrated", "underwhelming", "lackluster", "bland", "uninspired",
        "generic", "cliched", "predictable", "cheesy", "cringe", "awkward",
        "painful", "unbearable",
    }
)

NEGATION_WORDS = frozenset(
    {
        "not", "no", "never", "nothing", "nobody", "nowhere", "neither",
        "barely", "hardly", "scarcely",
    }
)


def get_lexicon_info() -> dict:
    """Returns the size of each word set, for health and info endpoints."""
    return {
        "positive_words": len(POSITIVE_WORDS),
        "negative_words": len(NEGATIVE_WORDS),
        "negation_words": len(NEGATION_WORDS),
    }
