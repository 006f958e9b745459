"""Reference Tables - static lookup data for AI presence scoring

Everything the scorers compare against lives here: source tier lists, keyword
lists, completeness checklists, industry benchmarks and the composite weights.

Changing any value changes scores for every audit and breaks comparability
with previously stored results, so bump TABLES_VERSION with every edit.
"""

from types import MappingProxyType

TABLES_VERSION = "1.0.0"

# ==================== Platforms ====================

# Platforms included in the cross-platform comparison, in output order.
COMPARISON_PLATFORMS = ('chatgpt', 'perplexity', 'gemini', 'claude', 'grok')

# ==================== Source Tiers ====================

# Tier 1: major news, reference and academic outlets
TIER1_DOMAINS = (
    'wikipedia.org', 'wikidata.org', 'forbes.com', 'bloomberg.com',
    'wsj.com', 'nytimes.com', 'ft.com', 'economist.com', 'reuters.com',
    'apnews.com', 'bbc.com', 'cnn.com', 'nature.com', 'science.org',
    'ieee.org', 'acm.org', 'harvard.edu', 'stanford.edu', 'mit.edu',
)

# Tier 2: trade press, professional networks, structured business data
TIER2_DOMAINS = (
    'techcrunch.com', 'venturebeat.com', 'theverge.com', 'wired.com',
    'arstechnica.com', 'zdnet.com', 'cnet.com', 'mashable.com',
    'businessinsider.com', 'fastcompany.com', 'inc.com', 'entrepreneur.com',
    'crunchbase.com', 'linkedin.com', 'medium.com', 'substack.com',
)

TIER_AUTHORITY = MappingProxyType({1: 100, 2: 60, 3: 30})

# Knowledge-graph / registry / markup vocabulary sources
STRUCTURED_DATA_DOMAINS = ('wikidata.org', 'crunchbase.com', 'schema.org')

# ==================== Optimization Signals ====================

WIKIPEDIA_DOMAIN = 'wikipedia.org'
KNOWLEDGE_BASE_DOMAIN = 'wikidata.org'
STRUCTURED_PROFILE_DOMAINS = ('crunchbase.com', 'linkedin.com', 'schema.org')
MAJOR_MEDIA_DOMAINS = (
    'forbes.com', 'techcrunch.com', 'bloomberg.com', 'wsj.com', 'nytimes.com',
)
FRESHNESS_PATTERN = r'202[3-5]|recently|latest|current'

OPTIMIZATION_POINTS = MappingProxyType({
    'wikipedia': 25,
    'knowledge_base': 20,
    'structured_data': 20,
    'major_media': 20,
    'fresh_content': 15,
})

# ==================== Text Signals ====================

SUBSTANTIVE_INFO_PATTERN = r'founded|ceo|company|product|service'

POSITIVE_KEYWORDS = (
    'leading', 'innovative', 'successful', 'renowned', 'expert',
    'pioneer', 'award', 'recognized', 'trusted', 'prominent',
    'influential', 'respected', 'acclaimed', 'distinguished',
)

NEGATIVE_KEYWORDS = (
    'controversial', 'criticized', 'scandal', 'lawsuit', 'failed',
    'problematic', 'disputed', 'accused', 'alleged', 'questionable',
    'concerns', 'issues', 'challenges', 'struggling',
)

# ==================== Completeness Checklists ====================

REQUIRED_FIELDS = MappingProxyType({
    'person': ('name', 'title', 'company', 'background', 'expertise'),
    'company': ('name', 'founded', 'founder', 'product', 'industry', 'headquarters'),
})

OPTIONAL_FIELDS = MappingProxyType({
    'person': ('education', 'achievements', 'publications', 'social'),
    'company': ('employees', 'revenue', 'funding', 'customers', 'competitors'),
})

# ==================== Composite Score ====================

DIMENSION_WEIGHTS = MappingProxyType({
    'visibility': 0.25,
    'authority': 0.20,
    'sentiment': 0.15,
    'completeness': 0.15,
    'source_quality': 0.15,
    'optimization': 0.10,
})

INDUSTRY_BENCHMARKS = MappingProxyType({
    'technology': 75,
    'finance': 70,
    'healthcare': 65,
    'retail': 60,
    'manufacturing': 55,
    'default': 60,
})
