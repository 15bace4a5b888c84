"""
Per-theme fallback phrases for each output section

Every table is keyed by Theme and must have a PERSONAL_GROWTH entry, which
is used for any theme without its own row. validate_tables() runs at import
so a broken table fails loudly instead of producing empty sections.
"""
from typing import Dict, Tuple

from layer_2_theme_extraction.theme_config import Theme, FALLBACK_THEME

PhraseTable = Dict[Theme, Tuple[str, ...]]

ISSUES_PER_THEME = 3
CONTROLLABLES_PER_THEME = 4
LET_GO_PER_THEME = 3
STEPS_PER_THEME = 3

THEME_ISSUES: PhraseTable = {
    Theme.WORK: (
        "Balancing workload with available capacity",
        "Navigating workplace expectations",
        "Setting professional boundaries",
    ),
    Theme.RELATIONSHIPS: (
        "Communicating needs clearly",
        "Balancing personal space with connection",
        "Addressing unresolved tensions",
    ),
    Theme.FINANCES: (
        "Managing financial uncertainty",
        "Prioritizing spending decisions",
        "Building financial security",
    ),
    Theme.FAMILY: (
        "Navigating family dynamics",
        "Setting healthy boundaries",
        "Balancing obligations and self-care",
    ),
    Theme.HEALTH: (
        "Managing energy levels",
        "Addressing underlying stress",
        "Prioritizing wellbeing",
    ),
    Theme.DECISIONS: (
        "Weighing options with incomplete information",
        "Fear of making the wrong choice",
        "Analysis paralysis",
    ),
    Theme.FUTURE: (
        "Uncertainty about next steps",
        "Aligning actions with long-term goals",
        "Impatience with progress",
    ),
    Theme.TIME_MANAGEMENT: (
        "Too many competing priorities",
        "Difficulty saying no",
        "Feeling behind on everything",
    ),
    Theme.SOCIAL: (
        "Maintaining meaningful connections",
        "Finding belonging",
        "Balancing solitude and community",
    ),
    Theme.CREATIVE_PROJECTS: (
        "Getting started despite uncertainty",
        "Overcoming perfectionism",
        "Finding time for creation",
    ),
    Theme.PERSONAL_GROWTH: (
        "Identifying what truly matters",
        "Moving forward despite confusion",
        "Processing complex thoughts",
    ),
}

THEME_CONTROLLABLES: PhraseTable = {
    Theme.WORK: (
        "How you prioritize your tasks each day",
        "When and how you communicate with your manager",
        "The boundaries you set around work hours",
        "Your response to added requests",
    ),
    Theme.RELATIONSHIPS: (
        "How you express your needs",
        "The energy you invest in the relationship",
        "How you respond to conflict",
        "The time you dedicate to connection",
    ),
    Theme.FINANCES: (
        "Your daily spending choices",
        "Where you seek financial guidance",
        "How you track your money",
        "The financial conversations you initiate",
    ),
    Theme.FAMILY: (
        "How you respond to family requests",
        "The boundaries you communicate",
        "The time you allocate to family",
        "Your emotional reactions",
    ),
    Theme.HEALTH: (
        "Your daily habits and routines",
        "When you rest vs push through",
        "Who you ask for support",
        "How you talk to yourself",
    ),
    Theme.DECISIONS: (
        "What information you gather",
        "Who you consult",
        "The deadline you set for deciding",
        "Whether you accept imperfection",
    ),
    Theme.FUTURE: (
        "The first small step you take",
        "How you define success",
        "Who you share your plans with",
        "What you learn each day",
    ),
    Theme.TIME_MANAGEMENT: (
        "What you say yes and no to",
        "How you structure your morning",
        "Which tasks you tackle first",
        "When you take breaks",
    ),
    Theme.SOCIAL: (
        "Who you reach out to",
        "How you show up in conversations",
        "The invitations you accept",
        "How you nurture existing friendships",
    ),
    Theme.CREATIVE_PROJECTS: (
        "When you show up to create",
        "What you let yourself try",
        "How you define done",
        "Whose feedback you seek",
    ),
    Theme.PERSONAL_GROWTH: (
        "The questions you sit with",
        "How you process your thoughts",
        "What you choose to focus on today",
        "How you talk to yourself",
    ),
}

THEME_LET_GO: PhraseTable = {
    Theme.WORK: (
        "Others' reactions to your boundaries",
        "Past mistakes at work",
        "Making everyone happy",
    ),
    Theme.RELATIONSHIPS: (
        "How the other person responds",
        "Changing someone who doesn't want to change",
        "Perfect timing",
    ),
    Theme.FINANCES: (
        "Past financial decisions",
        "Economic factors beyond your control",
        "Keeping up with others",
    ),
    Theme.FAMILY: (
        "Family members' choices",
        "Old family patterns overnight",
        "Being understood by everyone",
    ),
    Theme.HEALTH: (
        "Perfect health all the time",
        "Comparing to your past self",
        "Instant recovery",
    ),
    Theme.DECISIONS: (
        "Knowing the outcome beforehand",
        "Making a perfect choice",
        "Others' opinions of your decision",
    ),
    Theme.FUTURE: (
        "Controlling timelines",
        "Certainty about outcomes",
        "Having it all figured out",
    ),
    Theme.TIME_MANAGEMENT: (
        "Doing everything",
        "Others expecting immediate responses",
        "Productivity as identity",
    ),
    Theme.SOCIAL: (
        "Others' perceptions of you",
        "Being liked by everyone",
        "Forcing connections",
    ),
    Theme.CREATIVE_PROJECTS: (
        "Perfection in creative work",
        "External validation",
        "Comparing to others",
    ),
    Theme.PERSONAL_GROWTH: (
        "Having all the answers right now",
        "Fixing everything at once",
        "Linear progress",
    ),
}

THEME_STEPS: PhraseTable = {
    Theme.WORK: (
        "Block 30 minutes to list and prioritize your top 3 tasks",
        "Draft a message setting one clear boundary",
        "Schedule a conversation with your manager about capacity",
    ),
    Theme.RELATIONSHIPS: (
        "Write down exactly what you need (without how the other person should change)",
        "Plan one moment of undivided attention this week",
        "Express one appreciation you have been holding back",
    ),
    Theme.FINANCES: (
        "List all financial obligations for the next 30 days",
        "Identify one expense you can reduce this week",
        "Set up auto-save for even a tiny amount",
    ),
    Theme.FAMILY: (
        "Choose one boundary to communicate this week",
        "Plan quality time with the family member who matters most",
        "Write out what you wish they understood (just for yourself)",
    ),
    Theme.HEALTH: (
        "Commit to one non-negotiable rest period today",
        "Write down what good enough looks like for your health this week",
        "Tell one person how you are really doing",
    ),
    Theme.DECISIONS: (
        "List the top 3 options you are considering",
        "Give yourself a decision deadline",
        "Identify the one value that matters most in this choice",
    ),
    Theme.FUTURE: (
        "Define what progress looks like this week (not this year)",
        "Identify the smallest possible next action",
        "Write your future self a note about what you are attempting",
    ),
    Theme.TIME_MANAGEMENT: (
        "List everything demanding your attention right now",
        "Choose 3 things to focus on and consciously release the rest",
        "Identify one commitment to renegotiate or decline",
    ),
    Theme.SOCIAL: (
        "Send one message to someone you have been meaning to contact",
        "Schedule one social activity, even if brief",
        "Reflect on what you are seeking from connection",
    ),
    Theme.CREATIVE_PROJECTS: (
        "Set a timer for 15 minutes and create without judgment",
        "Identify the smallest possible version of your project",
        "Share your idea with one trusted person",
    ),
    Theme.PERSONAL_GROWTH: (
        "Write freely for 10 minutes about what you are processing",
        "Identify the question at the heart of your confusion",
        "Choose one tiny action that feels aligned",
    ),
}

TABLE_SIZES = {
    "THEME_ISSUES": (THEME_ISSUES, ISSUES_PER_THEME),
    "THEME_CONTROLLABLES": (THEME_CONTROLLABLES, CONTROLLABLES_PER_THEME),
    "THEME_LET_GO": (THEME_LET_GO, LET_GO_PER_THEME),
    "THEME_STEPS": (THEME_STEPS, STEPS_PER_THEME),
}


def phrases_for(table: PhraseTable, theme: Theme) -> Tuple[str, ...]:
    """
    Look up a theme's phrases, defaulting to the personal-growth row

    Args:
        table: One of the THEME_* tables
        theme: Theme to look up

    Returns:
        Tuple of phrases
    """
    return table.get(theme, table[FALLBACK_THEME])


def validate_tables() -> None:
    """
    Check every table has the fallback row and the expected row sizes

    Raises:
        ValueError: If a table is incomplete
    """
    for table_name, (table, expected_size) in TABLE_SIZES.items():
        if FALLBACK_THEME not in table:
            raise ValueError(f"{table_name} is missing the {FALLBACK_THEME.value} row")
        for theme, phrases in table.items():
            if not isinstance(theme, Theme):
                raise ValueError(f"{table_name} has a non-Theme key: {theme!r}")
            if len(phrases) != expected_size:
                raise ValueError(
                    f"{table_name}[{theme.value}] has {len(phrases)} phrases, expected {expected_size}"
                )
            if len({phrase.lower() for phrase in phrases}) != len(phrases):
                raise ValueError(f"{table_name}[{theme.value}] has duplicate phrases")


validate_tables()
