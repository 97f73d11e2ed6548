"""Research prompt templates.

Each builder assembles the prompt text only; required arguments have already
been checked by ``PromptTemplate.build``. Optional sections are appended in a
fixed order and omitted entirely when their argument is absent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .registry import (
    PromptTemplate,
    TemplateArgument,
    TemplateName,
    as_list,
    is_present,
    numbered,
)


def build_research_analysis_prompt(args: Mapping[str, Any]) -> str:
    prompt = f"Conduct a comprehensive research analysis on: {args['topic']}"

    if is_present(args.get("focus_areas")):
        prompt += f"\n\nFocus areas: {args['focus_areas']}"

    urls = as_list(args.get("urls"))
    if urls:
        prompt += "\n\nPlease also analyze these specific sources:" + numbered(urls)

    prompt += """

Please provide:
1. Current state of the field/topic
2. Recent developments and breakthroughs
3. Key challenges and opportunities
4. Future outlook and trends
5. Practical implications

Structure your response with clear sections and cite all sources."""
    return prompt


def build_current_events_prompt(args: Mapping[str, Any]) -> str:
    prompt = (
        "Provide current information and recent developments about: "
        f"{args['topic']}"
    )

    if is_present(args.get("time_period")):
        prompt += f"\n\nTime focus: {args['time_period']}"

    if is_present(args.get("region")):
        prompt += f"\n\nRegional focus: {args['region']}"

    prompt += """

Please include:
1. Latest news and developments
2. Key events and milestones
3. Current status and situation
4. Impact and implications
5. What to watch for next

Prioritize the most recent and reliable information with proper source attribution."""
    return prompt


def build_technical_documentation_prompt(args: Mapping[str, Any]) -> str:
    urls = as_list(args["documentation_urls"])
    prompt = (
        "Analyze the technical documentation at these URLs and answer: "
        f"{args['question']}"
    )
    prompt += "\n\nDocumentation sources:" + numbered(urls)

    if is_present(args.get("complexity_level")):
        prompt += f"\n\nTarget audience: {args['complexity_level']} level"

    prompt += """

Please provide:
1. Clear explanation of the relevant concepts
2. Key implementation details
3. Best practices and recommendations
4. Common pitfalls to avoid
5. Practical examples where applicable

Structure your response for clarity and include code examples if relevant."""
    return prompt


def build_compare_sources_prompt(args: Mapping[str, Any]) -> str:
    urls = as_list(args["source_urls"])
    prompt = f'Compare information about "{args["topic"]}" across these sources:'
    prompt += numbered(urls)

    if is_present(args.get("comparison_criteria")):
        prompt += f"\n\nComparison criteria: {args['comparison_criteria']}"

    prompt += """

Please provide:
1. Summary of each source's perspective
2. Key similarities between sources
3. Important differences and contradictions
4. Analysis of source credibility and methodology
5. Synthesis and overall conclusions
6. Areas where more research may be needed

Structure your response with clear sections for each source and comparative analysis."""
    return prompt


def build_fact_check_prompt(args: Mapping[str, Any]) -> str:
    prompt = f'Fact-check the following claim: "{args["claim"]}"'

    if is_present(args.get("context")):
        prompt += f"\n\nContext: {args['context']}"

    prompt += """

Please provide:
1. Verification status (True/False/Partially True/Unclear)
2. Supporting evidence from reliable sources
3. Any contradictory evidence found
4. Important nuances or context needed
5. Source credibility assessment
6. Final assessment and confidence level

Use current, authoritative sources and be explicit about any limitations in the available evidence."""
    return prompt


def build_deepthink_prompt(args: Mapping[str, Any]) -> str:
    prompt = (
        "Please engage in deep, thorough reasoning about the following complex "
        f"problem: {args['problem']}"
    )

    if is_present(args.get("context")):
        prompt += f"\n\nContext and constraints: {args['context']}"

    if is_present(args.get("approach")):
        prompt += f"\n\nAnalytical approach: {args['approach']}"

    prompt += """

Take your time to think deeply about this problem. Consider:
1. Multiple perspectives and viewpoints
2. Underlying assumptions and their validity
3. Potential solutions and their trade-offs
4. Edge cases and complications
5. Long-term implications and consequences
6. Alternative interpretations or framings
7. Supporting evidence and counterarguments
8. Practical implementation challenges

Provide a comprehensive analysis that demonstrates deep reasoning and thorough consideration of all relevant factors."""
    return prompt


RESEARCH_ANALYSIS = PromptTemplate(
    name=TemplateName.RESEARCH_ANALYSIS,
    description=(
        "Research a topic comprehensively with automatic web search and URL analysis"
    ),
    arguments=(
        TemplateArgument(
            "topic", "The research topic or question you want to investigate", True
        ),
        TemplateArgument(
            "urls",
            "Optional URLs to specific papers, articles, or resources to include "
            "in the analysis",
        ),
        TemplateArgument(
            "focus_areas",
            "Specific aspects to focus on (e.g., 'recent developments', "
            "'technical details', 'practical applications')",
        ),
    ),
    builder=build_research_analysis_prompt,
    temperature=0.3,
    max_tokens=4096,
)

CURRENT_EVENTS = PromptTemplate(
    name=TemplateName.CURRENT_EVENTS,
    description="Get up-to-date information on recent developments and news",
    arguments=(
        TemplateArgument(
            "topic", "The topic or event you want current information about", True
        ),
        TemplateArgument(
            "time_period",
            "Time period to focus on (e.g., 'last week', 'past month', 'recent')",
        ),
        TemplateArgument(
            "region",
            "Geographic region for regional news (e.g., 'US', 'Europe', 'global')",
        ),
    ),
    builder=build_current_events_prompt,
    temperature=0.2,
    max_tokens=3072,
)

TECHNICAL_DOCUMENTATION = PromptTemplate(
    name=TemplateName.TECHNICAL_DOCUMENTATION,
    description="Analyze technical documentation and provide clear explanations",
    arguments=(
        TemplateArgument(
            "documentation_urls",
            "URLs to technical documentation, APIs, RFCs, or specifications",
            True,
        ),
        TemplateArgument(
            "question",
            "Specific question about the documentation or what you want to understand",
            True,
        ),
        TemplateArgument(
            "complexity_level",
            "Target complexity level: 'beginner', 'intermediate', or 'advanced'",
        ),
    ),
    builder=build_technical_documentation_prompt,
    temperature=0.1,
    max_tokens=4096,
)

COMPARE_SOURCES = PromptTemplate(
    name=TemplateName.COMPARE_SOURCES,
    description="Compare information across multiple sources and provide analysis",
    arguments=(
        TemplateArgument(
            "topic", "The topic or subject you want to compare across sources", True
        ),
        TemplateArgument(
            "source_urls", "URLs to different sources you want to compare", True
        ),
        TemplateArgument(
            "comparison_criteria",
            "Specific aspects to compare (e.g., 'methodology', 'conclusions', "
            "'data quality')",
        ),
    ),
    builder=build_compare_sources_prompt,
    temperature=0.2,
    max_tokens=4096,
)

FACT_CHECK = PromptTemplate(
    name=TemplateName.FACT_CHECK,
    description=(
        "Verify claims and statements with current information and reliable sources"
    ),
    arguments=(
        TemplateArgument(
            "claim",
            "The claim, statement, or information you want to fact-check",
            True,
        ),
        TemplateArgument(
            "context",
            "Additional context about where the claim came from or specific "
            "aspects to verify",
        ),
    ),
    builder=build_fact_check_prompt,
    temperature=0.1,
)

DEEPTHINK = PromptTemplate(
    name=TemplateName.DEEPTHINK,
    description=(
        "Deep reasoning and analysis for complex problems requiring maximum "
        "thinking capacity"
    ),
    arguments=(
        TemplateArgument(
            "problem",
            "The complex problem, question, or scenario you want deep analysis on",
            True,
        ),
        TemplateArgument(
            "context",
            "Additional context, constraints, or background information relevant "
            "to the problem",
        ),
        TemplateArgument(
            "approach",
            "Specific analytical approach or methodology to use (e.g., "
            "'step-by-step', 'pros-cons', 'multiple-perspectives')",
        ),
    ),
    builder=build_deepthink_prompt,
    temperature=0.7,
    thinking_budget=32768,
)

ALL_TEMPLATES: tuple[PromptTemplate, ...] = (
    RESEARCH_ANALYSIS,
    CURRENT_EVENTS,
    TECHNICAL_DOCUMENTATION,
    COMPARE_SOURCES,
    FACT_CHECK,
    DEEPTHINK,
)
