"""
AI Interviewer Prompt Templates

Contains the prompt used to have a hosted model generate rehearsal
questions about a specific project.
"""

from prepfolio.models.project import ProjectContext
from prepfolio.models.question import QuestionCategory
from prepfolio.prompts._project import format_project_details


class InterviewerPrompts:
    """
    Prompt templates for question generation.

    Key principles:
    - Questions are about THIS project, never generic
    - Mix of categories and difficulty
    - Output is a bare JSON array the caller can parse
    """

    SYSTEM_CONTEXT = """You are a senior technical interviewer preparing questions about a candidate's own software project.

Your role:
- Ask about the decisions the candidate actually made
- Probe architecture, tradeoffs and challenges, not trivia
- Test deep understanding rather than recall of facts
"""

    def generate_questions_prompt(self, project: ProjectContext, count: int) -> str:
        """Generate prompt for a batch of questions."""

        categories = "|".join(category.value for category in QuestionCategory)

        prompt = f"""{self.SYSTEM_CONTEXT}

=== PROJECT DETAILS ===
{format_project_details(project)}

=== RULES ===
1. Generate exactly {count} questions
2. Questions must be specific to THIS project, not generic
3. Include at least one question about architecture or design decisions
4. Include at least one question about challenges faced
5. Spread the questions across different categories

IMPORTANT: Output ONLY a JSON array, no preamble text. Start directly with [

[{{"question": "...", "category": "{categories}"}}]"""

        return prompt
