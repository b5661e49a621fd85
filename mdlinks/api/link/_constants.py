"""Constants for link resolution (private)."""

# Markdown family: any of these is an acceptable stand-in for another under loose matching
MARKDOWN_EXTENSIONS = ("md", "markdown", "mkd", "mkdn", "mdwn", "mdown", "mdtxt", "mdtext")

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "svg", "bmp", "webp", "ico")

# Repository pages GitHub serves next to the code browser, e.g. https://github.com/user/repo/issues
GITHUB_LINKS = ("blob", "commits", "graphs", "issues", "pulls", "pulse", "wiki")

# Directory suffix GitHub uses for a cloned wiki: MyProject.wiki
WIKI_DIR_SUFFIX = ".wiki"

DEFAULT_BRANCH = "master"

# Scheme-only forms that never carry '//' after the colon
OPAQUE_SCHEMES = ("mailto", "file", "tel", "data", "javascript", "news", "urn")

# Characters that cannot appear in a link target typed into a document
MALFORMED_CHARS = ("\x00", "\r", "\n", "\t")

HYPOTHETICAL_WIKI_PAGE = "wiki_page"
HYPOTHETICAL_GITHUB_LINK = "github_link"
