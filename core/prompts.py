"""
Prompt templates for word generation and semantic answer checking.
"""

# ---- System Prompts ----

SYSTEM_PROMPT_GENERATOR = (
    "You are an experienced English teacher preparing Chinese students for "
    "standardized English exams."
)

SYSTEM_PROMPT_ORACLE = (
    "You are a bilingual English-Chinese examiner who grades vocabulary "
    "translations by meaning, not by exact wording."
)

# ---- Word Batch ----

BATCH_INSTRUCTIONS = """Generate a list of {count} challenging English vocabulary words specifically for the {level} level.
Focus on words that are frequently tested or easily confused.
Provide accurate Chinese meanings (including synonyms), phonetic symbols, and a clear example sentence for each.

For every word:
- word: the English headword in its dictionary form
- phonetic: IPA transcription, e.g. /əˈbʌndənt/
- meanings: at least {min_meanings} distinct, commonly accepted Chinese translations or synonyms
- example: one natural English sentence using the word
- example_translation: the Chinese translation of that sentence

Do not repeat words within the list."""

# ---- Answer Check ----

CHECK_INSTRUCTIONS = """Word: "{word}"
Standard Meanings: {meanings}
User Answer: "{answer}"

Task: Determine if the User Answer is a correct Chinese translation for the Word.
It doesn't need to match the Standard Meanings exactly, but must be semantically accurate.
Return is_correct (boolean) and explanation (short reason in Chinese)."""


def format_prompt(base_instructions: str, **kwargs) -> str:
    """
    Format a prompt template with dynamic values.

    Args:
        base_instructions: The prompt template string
        **kwargs: Values to substitute (e.g., count=5)

    Returns:
        Formatted prompt string
    """
    return base_instructions.format(**kwargs)
