"""
Markdown templates for the quick guide and the detailed documentation.

The prose is static; only the query, extracted key points and concepts, the
grouped result links and the footer (date, source count) vary.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from datetime import date

from searchdocs.domain.entities import SearchResult
from searchdocs.shared.text import title_case

from .extraction import group_by_source

QUICK_GUIDE_KEY_POINTS = 4
QUICK_GUIDE_CONCEPTS = 6
CORE_CONCEPTS = 8
KEY_COMPONENTS_END = 12

FALLBACK_BENEFITS = (
    "• Improved efficiency and productivity\n"
    "• Enhanced capabilities and functionality  \n"
    "• Better integration and compatibility\n"
    "• Reduced complexity and learning curve"
)

FALLBACK_KEY_INFORMATION = (
    "- Essential for modern implementations\n"
    "- Widely adopted across industries\n"
    "- Continuous evolution and improvement\n"
    "- Strong community support and resources"
)

CONCEPT_DESCRIPTIONS: tuple[str, ...] = (
    "Core component essential for understanding {topic}",
    "Fundamental aspect that plays a crucial role in {topic}",
    "Key element that supports the implementation of {topic}",
    "Important factor in the successful deployment of {topic}",
    "Essential building block for {topic} systems",
)


def format_date(day: date) -> str:
    """Numeric US short date without zero padding, e.g. ``3/7/2025``."""
    return f"{day.month}/{day.day}/{day.year}"


def describe_concept(topic: str, rng: random.Random) -> str:
    return rng.choice(CONCEPT_DESCRIPTIONS).format(topic=topic)


def render_quick_guide(query: str, key_points: Sequence[str], concepts: Sequence[str]) -> str:
    topic = title_case(query)

    if key_points:
        benefits = "\n".join(f"• {point}" for point in key_points[:QUICK_GUIDE_KEY_POINTS])
    else:
        benefits = FALLBACK_BENEFITS

    essentials = "\n".join(
        f"• **{title_case(concept)}**: Core component of {topic}"
        for concept in concepts[:QUICK_GUIDE_CONCEPTS]
    )

    return f"""# Quick Start Guide for {topic}

## What is {topic}?
{topic} is an important topic that encompasses various concepts, technologies, and methodologies. This quick guide provides essential information to get you started.

## Key Benefits:
{benefits}

## Essential Concepts:
{essentials}

## Getting Started:
1. **Understand the Basics**: Learn fundamental concepts and terminology
2. **Explore Use Cases**: Identify how {topic} applies to your specific needs
3. **Choose Tools**: Select appropriate tools and technologies
4. **Start Small**: Begin with simple implementations
5. **Scale Gradually**: Expand your usage as you gain experience

## Next Steps:
- Review the complete documentation below
- Explore recommended tools and platforms
- Join relevant communities and forums
- Stay updated with latest developments

---
*Generated from multiple search engines and knowledge sources*"""


def _render_resource_groups(results: Sequence[SearchResult]) -> str:
    blocks = []
    for source, grouped in group_by_source(results).items():
        links = "\n".join(f"- [{result.title}]({result.url})" for result in grouped)
        blocks.append(f"\n#### {source}\n{links}\n")
    return "\n".join(blocks)


def render_detailed_documentation(
    query: str,
    key_points: Sequence[str],
    concepts: Sequence[str],
    results: Sequence[SearchResult],
    *,
    rng: random.Random,
    today: date,
) -> str:
    """
    Render the long-form guide.

    Each of the first eight concepts gets a description drawn independently
    from CONCEPT_DESCRIPTIONS via *rng*; everything else is deterministic.
    """
    topic = title_case(query)

    principles = "\n".join(
        f"- **{title_case(concept)}**: {describe_concept(topic, rng)}"
        for concept in concepts[:CORE_CONCEPTS]
    )
    components = "\n".join(
        f"- **{title_case(concept)}**: Supporting infrastructure and functionality"
        for concept in concepts[CORE_CONCEPTS:KEY_COMPONENTS_END]
    )
    if key_points:
        important = "\n".join(f"- {point}" for point in key_points)
    else:
        important = FALLBACK_KEY_INFORMATION

    return f"""# Complete Documentation for {topic}

## Table of Contents
1. [Introduction](#introduction)
2. [Core Concepts](#core-concepts)
3. [Key Information](#key-information)
4. [Implementation Guide](#implementation-guide)
5. [Best Practices](#best-practices)
6. [Common Use Cases](#common-use-cases)
7. [Resources and References](#resources-and-references)

## 1. Introduction

{topic} represents a comprehensive approach to solving complex challenges in modern technology and business environments. This documentation provides detailed insights, practical examples, and step-by-step guidance for implementing {topic} effectively.

### Why {topic} Matters
In today's rapidly evolving landscape, {topic} has become increasingly important for organizations seeking to optimize their operations, enhance user experiences, and maintain competitive advantages.

## 2. Core Concepts

### Fundamental Principles
{principles}

### Key Components
Understanding the essential components of {topic} is crucial for successful implementation:
{components}

## 3. Key Information

### Important Points
{important}

## 4. Implementation Guide

### Prerequisites
Before implementing {topic}, ensure you have:
- Technical infrastructure and system requirements
- Necessary skills and knowledge base
- Required tools and development environments
- Proper planning and project management structure

### Step-by-Step Implementation
1. **Planning Phase**: Define objectives, scope, and success criteria
2. **Research Phase**: Gather information and understand requirements
3. **Setup Phase**: Prepare environment and install dependencies
4. **Development Phase**: Build core functionality and features
5. **Testing Phase**: Conduct thorough testing and validation
6. **Deployment Phase**: Release and monitor system performance
7. **Maintenance Phase**: Ongoing support and continuous improvement

## 5. Best Practices

### Development Best Practices
- Follow industry standards and established conventions
- Implement proper documentation and code comments
- Use version control and collaborative development workflows
- Conduct regular reviews and quality assessments

### Performance Optimization
- Monitor system performance regularly
- Implement caching strategies where appropriate
- Optimize for scalability and future growth
- Regular maintenance and updates

## 6. Common Use Cases

### Enterprise Applications
Large organizations often implement {topic} to streamline operations, improve data management, and enhance decision-making processes.

### Small Business Solutions
Small and medium businesses can leverage {topic} to compete more effectively, reduce costs, and improve customer satisfaction.

### Personal Projects
Individual developers and enthusiasts use {topic} for learning, experimentation, and building innovative solutions.

## 7. Resources and References

### Search Results Summary
This documentation was compiled from the following sources:

{_render_resource_groups(results)}

### Additional Resources
- Official documentation and reference materials
- Community forums and discussion platforms
- Training materials and educational content
- Best practice examples and case studies

## Conclusion

This comprehensive guide provides the foundation for understanding and implementing {topic} effectively. The information has been compiled from multiple authoritative sources and structured to provide both quick reference and detailed guidance.

Continue exploring the resources provided, engage with the community, and apply these concepts to your specific use cases for optimal results.

---

*Documentation generated on: {format_date(today)}*
*Sources: Multiple search engines and knowledge bases*
*Total sources referenced: {len(results)}*"""
