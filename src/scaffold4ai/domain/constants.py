from __future__ import annotations

"""
Domain Constants.

Application version, the default chat-completions endpoint, the environment
variables read at startup, and the prompt that asks the model for a tree
drawing in the format the parser understands.
"""

APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_REQUEST_TIMEOUT = 60

ENV_API_KEY = "GROQ_API_KEY"
ENV_MODEL = "MODEL"
ENV_API_URL = "GROQ_API_URL"

LAYOUT_PROMPT_TEMPLATE = """You are a helpful coding assistant. Based on the following prompt, generate a well structured file and folder layout in a proper tree format with connecting lines.

Please follow these strict formatting rules:
1.  The root of the project should be explicitly named if the user's prompt implies a project name (e.g., "project-name/").
2.  Use proper tree characters: '├──' for items that have siblings below them, '└──' for the last item in a directory.
3.  Use vertical bars '│' for directory indentation.
4.  Use 4 spaces for each level of indentation.
5.  ALWAYS use a trailing slash "/" for directory names (e.g., "folder1/", "subfolder/").
6.  Do NOT use a trailing slash for file names (e.g., "file1.js", "README.md").
7.  Ensure consistent spacing and format like this example:
my-project/
├── src/
│   ├── main.go
│   └── utils/
│       └── helpers.go
├── tests/
│   └── main_test.go
├── .gitignore
└── README.md

IMPORTANT: ONLY return the tree structure. Do not include any explanations, introductions, or notes. Do not use backticks or any other markdown formatting around the tree.

Prompt: {prompt}"""
