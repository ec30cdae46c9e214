"""Test helper functions for building content trees on disk."""

from pathlib import Path
from textwrap import dedent


def write_file(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def write_content_tree(root: Path) -> Path:
    """Write a minimal content tree with one file of every kind."""
    write_file(
        root / "projects" / "inventory-optimizer.mdx",
        """
        ---
        title: Inventory Optimizer
        description: Safety stock planning for a regional distributor
        featured: true
        order: 1
        techStack: [Python, PostgreSQL]
        liveUrl: https://example.com/inventory
        challenge: Frequent stockouts
        ---
        Forecasting write-up.
        """,
    )
    write_file(
        root / "experience" / "acme.md",
        """
        ---
        company: Acme
        role: Staff Engineer
        startDate: 2021-07-01
        order: 1
        ---
        Leading the data platform.
        """,
    )
    write_file(
        root / "blog" / "postgres-tuning.mdx",
        dedent(
            """
            ---
            title: Tuning Postgres
            description: Notes from a production database
            publishedDate: 2024-03-01
            tags: [Database, " Postgres "]
            featured: true
            ---
            """
        )
        + " ".join(["word"] * 400)
        + "\n",
    )
    write_file(
        root / "blog" / "sql-basics.md",
        """
        ---
        title: SQL Basics
        description: Joins and indexes
        slug: sql-basics
        publishedDate: 2024-01-10
        updatedDate: 2024-04-02
        tags: [database]
        ---
        Short post.
        """,
    )
    write_file(
        root / "skills" / "python.md",
        """
        ---
        name: Python
        category: Programming Languages
        proficiency: expert
        order: 1
        ---
        """,
    )
    write_file(
        root / "now.mdx",
        """
        ---
        title: Now
        lastUpdated: 2024-05-20
        ---
        Writing about databases.
        """,
    )
    write_file(
        root / "about.md",
        """
        ---
        title: About
        description: Operations engineer
        currentRole: Staff Engineer
        currentCompany: Acme
        location: Berlin
        focusAreas: [Supply chain, Data]
        ---
        Hello.
        """,
    )
    write_file(
        root / "uses.md",
        """
        ---
        title: Uses
        ---
        A keyboard.
        """,
    )
    return root
