"""
AI Evaluator Prompt Templates

Contains structured prompts for evaluating rehearsal answers
according to the scoring rubric.

Evaluation dimensions:
- Completeness
- Accuracy
- Clarity
- Depth
- Interview readiness
"""

from prepfolio.models.project import ProjectContext
from prepfolio.prompts._project import format_project_details


class EvaluatorPrompts:
    """
    Prompt templates for AI evaluation of answers.

    Key principles:
    - Strict, rubric-based scoring
    - Reward specificity, punish keyword lists
    - Actionable feedback and one hard follow-up
    """

    SYSTEM_CONTEXT = """You are a senior technical interviewer evaluating a candidate's answer about their own project.

Your role:
- Score the answer strictly against the rubric
- Check it is consistent with the project details
- Note what was covered and what was missing
- Suggest one challenging follow-up question
"""

    SCORING_RUBRIC = """
=== SCORING RUBRIC (1-5 scale) ===

COMPLETENESS: Did they fully address the question?
ACCURACY: Is the technical content correct and consistent with the project details?
CLARITY: Is the answer well-structured and easy to follow?
DEPTH: Did they show deep understanding or just surface-level knowledge?
INTERVIEW READY: Would this impress in a real interview?

- 1-2: Vague, generic, or shows poor understanding
- 3: Basic answer, covers minimum requirements
- 4: Good answer with specific details
- 5: Excellent, would impress senior engineers

BE STRICT. Random keywords or generic answers score 1-2.
"""

    def generate_evaluation_prompt(
        self,
        project: ProjectContext,
        question: str,
        answer: str
    ) -> str:
        """Generate prompt for evaluating an answer."""

        prompt = f"""{self.SYSTEM_CONTEXT}

{self.SCORING_RUBRIC}

=== PROJECT CONTEXT ===
{format_project_details(project, include_solution=True)}

=== QUESTION ASKED ===
{question}

=== CANDIDATE'S ANSWER ===
"{answer}"

=== YOUR TASK ===
Evaluate the answer according to the rubric.

IMPORTANT: Output ONLY valid JSON, no preamble text. Start directly with {{

{{
    "scores": {{
        "completeness": <1-5>,
        "accuracy": <1-5>,
        "clarity": <1-5>,
        "depth": <1-5>,
        "interviewReady": <1-5>
    }},
    "feedback": "Specific feedback on what was good or bad",
    "followUp": "A challenging follow-up question",
    "coveredPoints": ["good points made"],
    "missedPoints": ["what they should have mentioned"]
}}"""

        return prompt
