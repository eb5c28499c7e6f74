"""
.gitignore template — common exclusions for JS/TS and Python projects.
"""

GITIGNORE_TEMPLATE = """\
# ── Dependencies ────────────────────────────────────────────────
node_modules/
.pnp
.pnp.js
.venv/
venv/

# ── Build output ────────────────────────────────────────────────
dist/
build/
out/
.next/
*.tsbuildinfo
__pycache__/
*.py[cod]
*.egg-info/

# ── Tests / coverage ────────────────────────────────────────────
coverage/
.coverage
htmlcov/
.pytest_cache/

# ── Logs ────────────────────────────────────────────────────────
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# ── Environment ─────────────────────────────────────────────────
.env
.env.*
!.env.example

# ── IDE / Editor ────────────────────────────────────────────────
.vscode/
.idea/
*.swp
*~

# ── OS files ────────────────────────────────────────────────────
.DS_Store
Thumbs.db
"""
