"""
README template.

Code fences are written as ''' and converted by
``escape_markdown_code_blocks`` before the file is written.
"""

README_TEMPLATE = """\
# 🚀 Project Name

Welcome! This project was bootstrapped with reinit.
It's already got the basics — now it's your turn to make it awesome ✨

## 🔧 Tech Stack

- ⚙️ Framework: _<Add your framework here>_
- 🛠️ Tools: _<Add your tooling, CLIs, etc>_
- 🧪 Tests: _<pytest, Vitest, or something else?>_
- 🧠 Linting: _<ruff, ESLint, Biome, etc>_
- 🌐 Deployment: _<Vercel, Netlify, Railway?>_

## 🚀 Getting Started

Clone the repo and install dependencies:

'''bash
bun install
bun dev
'''

Or if you're using another package manager:

'''bash
npm install && npm run dev
# or
pnpm i && pnpm dev
'''

## 🗂️ Project Structure

'''bash
src/
├── components/
├── pages/
├── lib/
└── styles/
'''

Feel free to tweak the structure to your liking.

## 🧩 Customize it

This project is just a starting point. You can add:

- 🧙 Your own components and UI
- 📦 APIs, auth, i18n, analytics, whatever you need

## 📄 License

MIT © YourNameHere
"""
