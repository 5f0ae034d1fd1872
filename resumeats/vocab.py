"""
Static vocabularies used by the segmenter, matchers and quality checks.

Everything here is immutable and built once at import time.
"""

from types import MappingProxyType

# Scanned across the whole résumé so skills outside a "Skills" header are found.
WELL_KNOWN_SKILLS = (
    # Programming languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Ruby", "PHP",
    "Go", "Rust", "Swift", "Kotlin", "Scala",
    # Web
    "React", "Angular", "Vue", "Next.js", "Node.js", "Express", "Django",
    "Flask", "FastAPI", "Spring Boot", "HTML", "CSS", "SASS",
    "Tailwind CSS", "Bootstrap",
    # Databases
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB",
    "Oracle", "SQL Server", "SQLite",
    # Cloud and DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Jenkins", "GitLab CI",
    "GitHub Actions", "Terraform", "Ansible", "CI/CD",
    # Tools and practices
    "Git", "REST API", "GraphQL", "Microservices", "Agile", "Scrum", "JIRA",
    "Linux", "Machine Learning", "TensorFlow", "PyTorch", "Pandas", "NumPy",
    "AI", "NLP", "Data Science",
)

# Each group lists normalised spellings of one skill.
SKILL_SYNONYM_GROUPS = (
    frozenset({"javascript", "js", "ecmascript"}),
    frozenset({"typescript", "ts"}),
    frozenset({"python", "py", "python3"}),
    frozenset({"react", "reactjs", "react.js"}),
    frozenset({"node", "nodejs", "node.js"}),
    frozenset({"vue", "vuejs", "vue.js"}),
    frozenset({"angular", "angularjs", "angular.js"}),
    frozenset({"express", "expressjs", "express.js"}),
    frozenset({"next", "nextjs", "next.js"}),
    frozenset({"mongodb", "mongo"}),
    frozenset({"postgresql", "postgres", "psql"}),
    frozenset({"mssql", "sql server", "microsoft sql server"}),
    frozenset({"aws", "amazon web services"}),
    frozenset({"gcp", "google cloud platform", "google cloud"}),
    frozenset({"azure", "microsoft azure"}),
    frozenset({"cicd", "continuous integration", "continuous delivery"}),
    frozenset({"kubernetes", "k8s"}),
    frozenset({"go", "golang"}),
    frozenset({"c#", "csharp", "c sharp"}),
    frozenset({"c++", "cpp"}),
    frozenset({".net", "dotnet"}),
    frozenset({"machine learning", "ml"}),
    frozenset({"artificial intelligence", "ai"}),
    frozenset({"natural language processing", "nlp"}),
    frozenset({"rest", "rest api", "restful", "restful api"}),
)


def _index_synonyms():
    index = {}
    for group_id, group in enumerate(SKILL_SYNONYM_GROUPS):
        for term in group:
            index.setdefault(term, set()).add(group_id)
    return MappingProxyType({k: frozenset(v) for k, v in index.items()})


SYNONYM_INDEX = _index_synonyms()

# Formatting check: presence of any one is enough.
FORMATTING_ACTION_VERBS = (
    "achieved", "managed", "led", "developed", "created", "improved",
    "increased", "decreased", "implemented", "designed", "built",
    "established", "launched",
)

# Quality analysis: occurrences are counted.
STRONG_ACTION_VERBS = (
    "achieved", "administered", "analyzed", "arranged", "built", "calculated",
    "collaborated", "completed", "conducted", "coordinated", "created", "delivered",
    "designed", "developed", "directed", "established", "evaluated", "executed",
    "facilitated", "generated", "implemented", "improved", "increased", "initiated",
    "launched", "led", "managed", "optimized", "organized", "planned", "produced",
    "reduced", "redesigned", "resolved", "streamlined", "supervised", "trained",
)

CLICHES = (
    "team player", "think outside the box", "go-getter", "hard worker",
    "detail-oriented", "self-motivated", "results-driven",
)

# AFINN-style valence, -5 (very negative) .. +5 (very positive).
SENTIMENT_LEXICON = MappingProxyType({
    "abandon": -2, "abandoned": -2, "accomplish": 2, "accomplished": 2,
    "achieve": 2, "achieved": 2, "achievement": 2, "achievements": 2,
    "active": 1, "admire": 3, "advantage": 2, "amazing": 4, "anger": -3,
    "angry": -3, "annoyed": -2, "anxious": -2, "award": 3, "awarded": 3,
    "awful": -3, "bad": -3, "benefit": 2, "best": 3, "better": 2, "blame": -2,
    "blamed": -2, "bored": -2, "boring": -3, "brilliant": 4, "broken": -1,
    "capable": 1, "careless": -2, "celebrate": 3, "clear": 1, "collapse": -2,
    "committed": 1, "complain": -2, "complained": -2, "confident": 2,
    "conflict": -2, "confused": -2, "creative": 2, "crisis": -3, "critical": -2,
    "damage": -3, "damaged": -3, "dead": -3, "decline": -1, "declined": -1,
    "defeat": -2, "delay": -1, "delayed": -1, "dependable": 2, "difficult": -1,
    "disappointed": -2, "disaster": -2, "dismissed": -2, "dispute": -2,
    "easy": 1, "effective": 2, "efficient": 2, "encourage": 2, "energetic": 2,
    "enthusiastic": 3, "error": -2, "errors": -2, "excellent": 3,
    "excited": 3, "exciting": 3, "fail": -2, "failed": -2, "failing": -2,
    "failure": -2, "fault": -2, "fear": -2, "fired": -2, "fix": 1, "fixed": 2,
    "fraud": -4, "frustrated": -2, "good": 3, "great": 3, "growth": 2,
    "happy": 3, "hate": -3, "helpful": 2, "honored": 2, "hurt": -2,
    "ideal": 2, "improve": 2, "improved": 2, "improvement": 2, "inability": -2,
    "incompetent": -2, "innovative": 2, "inspire": 2, "inspired": 2,
    "interest": 1, "lack": -2, "lacking": -2, "lazy": -1, "lose": -3,
    "lost": -3, "loss": -3, "mistake": -2, "mistakes": -2, "motivated": 1,
    "negative": -2, "outstanding": 5, "pain": -2, "passionate": 2,
    "poor": -2, "positive": 2, "problem": -2, "problems": -2, "proud": 2,
    "quit": -1, "recognized": 2, "reliable": 2, "resign": -1, "resigned": -1,
    "reward": 2, "rewarded": 2, "sad": -2, "skilled": 2, "strong": 2,
    "stuck": -2, "succeed": 3, "success": 2, "successful": 3,
    "successfully": 3, "support": 2, "supported": 2, "terminated": -2,
    "terrible": -3, "threat": -2, "trouble": -2, "trust": 1, "ugly": -3,
    "unable": -2, "unhappy": -2, "unsuccessful": -2, "violation": -2,
    "weak": -2, "win": 4, "won": 3, "worse": -3, "worst": -3, "wrong": -2,
})
