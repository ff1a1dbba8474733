"""Static keyword vocabularies used by every extractor.

Order matters: topic folding picks the *first* entry a topic contains.
"""

from __future__ import annotations

LANGUAGES: tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "ruby", "go", "rust", "c#", "php",
    "swift", "kotlin", "scala", "haskell", "clojure", "elixir", "erlang",
    "c", "c++", "objective-c", "dart", "lua", "perl", "r",
)

FRAMEWORKS: tuple[str, ...] = (
    "react", "vue", "angular", "svelte", "next", "nuxt", "gatsby",
    "express", "koa", "nest", "fastify", "hapi",
    "django", "flask", "fastapi", "spring", "rails", "laravel",
    "tensorflow", "pytorch", "keras",
)

TOOLS: tuple[str, ...] = (
    "webpack", "babel", "eslint", "prettier", "jest", "mocha", "cypress",
    "docker", "kubernetes", "aws", "azure", "gcp", "firebase",
    "graphql", "apollo", "redux", "mobx", "zustand",
    "git", "github", "gitlab", "bitbucket",
)

# Hashtags and tweet text: compact forms, no spaces
MICROBLOG_TOPICS: tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "ruby", "go", "rust", "c#", "php",
    "react", "vue", "angular", "svelte", "node", "deno", "rails", "django", "laravel",
    "aws", "azure", "gcp", "cloud", "docker", "kubernetes", "devops", "cicd",
    "ai", "ml", "machinelearning", "deeplearning", "data", "analytics",
    "web", "mobile", "frontend", "backend", "fullstack", "database", "sql", "nosql",
    "security", "blockchain", "crypto", "iot", "ar", "vr",
)

# Slides and articles: broader vocabulary including generic engineering terms
TECH_TOPICS: tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "ruby", "go", "rust", "c#", "php",
    "react", "vue", "angular", "svelte", "node", "deno", "rails", "django", "laravel",
    "aws", "azure", "gcp", "cloud", "docker", "kubernetes", "devops", "cicd",
    "ai", "ml", "machine learning", "deep learning", "data", "analytics",
    "web", "mobile", "frontend", "backend", "fullstack", "database", "sql", "nosql",
    "security", "blockchain", "crypto", "iot", "ar", "vr",
    "architecture", "microservices", "serverless", "testing", "agile", "scrum",
    "design", "ux", "ui", "accessibility", "performance", "optimization",
)

# Well-known technical accounts whose mention counts as a topic
TECH_ACCOUNTS: tuple[str, ...] = ("github", "stackoverflow", "nodejs", "reactjs")

# Markers for "is this slide deck technical at all"
TECHNICAL_CONTENT_KEYWORDS: tuple[str, ...] = (
    "code", "programming", "development", "software", "tech", "technology",
)

# Work-style keyword sets. Blog sets are bilingual (English + Japanese).
TEAM_KEYWORDS: tuple[str, ...] = ("team", "collaboration", "agile", "scrum", "kanban", "together")
INDIVIDUAL_KEYWORDS: tuple[str, ...] = ("personal", "individual", "solo", "self")
LEADERSHIP_KEYWORDS: tuple[str, ...] = ("lead", "leadership", "manage", "management", "strategy", "vision")
TECHNICAL_KEYWORDS: tuple[str, ...] = ("detail", "implementation", "code", "architecture", "design", "pattern")

BLOG_TEAM_KEYWORDS: tuple[str, ...] = TEAM_KEYWORDS + ("チーム", "協力", "協働")
BLOG_INDIVIDUAL_KEYWORDS: tuple[str, ...] = INDIVIDUAL_KEYWORDS + ("個人", "一人")
BLOG_LEADERSHIP_KEYWORDS: tuple[str, ...] = LEADERSHIP_KEYWORDS + ("リーダー", "戦略", "マネジメント")
BLOG_TECHNICAL_KEYWORDS: tuple[str, ...] = TECHNICAL_KEYWORDS + ("実装", "コード", "設計")
BLOG_EDUCATIONAL_KEYWORDS: tuple[str, ...] = (
    "teach", "learn", "education", "tutorial", "guide", "how-to", "学習", "教育", "チュートリアル",
)

# Code-block heuristic: a block must contain one generic marker...
CODE_MARKERS: tuple[str, ...] = ("function", "class", "import", "from", "def ", "var ", "const ", "let ")

# ...and the language-specific signature (all of a group, any group).
CODE_SIGNATURES: dict[str, tuple[tuple[str, ...], ...]] = {
    "javascript": (("const ",), ("let ",), ("function",)),
    "typescript": ((":", "interface"),),
    "python": (("def ",), ("import ",)),
    "java": (("public class",), ("private ",)),
    "ruby": (("def ",), ("end",)),
    "go": (("func ",), ("package ",)),
}
