"""
utils package
-------------
Markdown, frontmatter and slug helpers.

- md: frontmatter splitting/joining, hashing, word counts
- frontmatter: strict YAML load/dump
- markdown: body structure (headings, outline, fences, links)
- slugify: document identities
"""
