# Prompt templates for the writing assistant actions
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union


class TopicType(str, Enum):
    IELTS_WRITING = "IELTS Writing"
    IELTS_SPEAKING = "IELTS Speaking"
    DEBATE = "Debate"

    @classmethod
    def parse(cls, value: Union[str, "TopicType", None]) -> Optional["TopicType"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ActionKind(str, Enum):
    # Brainstorming
    OUTLINE = "outline"
    SUPPORT_ARGUMENTS = "support_arguments"
    OPPOSE_ARGUMENTS = "oppose_arguments"
    SAMPLE_ANSWER = "sample_answer"
    # While writing
    INTRODUCTION = "introduction"
    CONCLUSION = "conclusion"
    ELABORATE = "elaborate"
    EXAMPLE = "example"
    FINISH_SENTENCE = "finish_sentence"
    # Editing and feedback
    CORRECT_MISTAKES = "correct_mistakes"
    PARAPHRASE = "paraphrase"
    MAKE_LONGER = "make_longer"
    MAKE_SIMPLER = "make_simpler"
    IMPROVE = "improve"
    SUGGESTIONS = "suggestions"
    SUMMARIZE = "summarize"
    # Vocabulary
    DICTIONARY = "dictionary"
    SYNONYMS = "synonyms"
    ANTONYMS = "antonyms"
    OTHER_WAYS_TO_SAY = "other_ways_to_say"

    @classmethod
    def parse(cls, value: Union[str, "ActionKind", None]) -> Optional["ActionKind"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Persona:
    question_type: str
    actor: str


IELTS_CANDIDATE = "an IELTS test taker with a band score of 8.0"

PERSONAS: Dict[TopicType, Persona] = {
    TopicType.IELTS_WRITING: Persona("IELTS Writing Task 2", IELTS_CANDIDATE),
    TopicType.IELTS_SPEAKING: Persona("IELTS Speaking", IELTS_CANDIDATE),
    TopicType.DEBATE: Persona("debate", "a debater"),
}
DEFAULT_PERSONA = Persona("", "a person")


def persona_for(topic_type: Union[str, TopicType, None]) -> Persona:
    topic = TopicType.parse(topic_type)
    if topic is None:
        return DEFAULT_PERSONA
    return PERSONAS[topic]


# Placeholders: {actor}, {question_type}, {question}, {content}
ESSAY_CONTEXT = "For your information, the essay is written in response to the following {question_type} question: {question}"

TEMPLATES: Dict[ActionKind, str] = {
    ActionKind.OUTLINE: "Act as {actor}. Write an essay outline in response to the following {question_type} question: {question}",
    ActionKind.SUPPORT_ARGUMENTS: "Act as {actor}. Given the following {question_type} question, generate 3 arguments to support the statement: {question}",
    ActionKind.OPPOSE_ARGUMENTS: "Act as {actor}. Given the following {question_type} question, generate 3 arguments to oppose the statement: {question}",
    ActionKind.SAMPLE_ANSWER: "Act as {actor}. Write an essay in response to the following {question_type} question with at least 250 words: {question}",

    ActionKind.INTRODUCTION: "Act as {actor}. Write a short introduction paragraph for an essay in response to the following {question_type} question:: {question}",
    ActionKind.CONCLUSION: "Act as {actor}. Write a short conclusion paragraph for this half-done essay:\n\"{content}\"\n" + ESSAY_CONTEXT,
    ActionKind.ELABORATE: "Act as {actor}. Elaborate/Explain the following argument in 3-4 sentences:\n\"{content}\"\n" + ESSAY_CONTEXT,
    ActionKind.EXAMPLE: "Act as {actor}. Give and explain an example in support of the following argument in 1-2 sentences:\n\"{content}\"\n" + ESSAY_CONTEXT,
    ActionKind.FINISH_SENTENCE: "Act as {actor}. Finish this sentence for me:\n\"{content}\"\n" + ESSAY_CONTEXT,

    ActionKind.CORRECT_MISTAKES: "Point out clearly the mistakes in this essay and how to correct them: {content}",
    ActionKind.PARAPHRASE: "Paraphrase/Rephrase this sentence/paragraph: \n{content}",
    ActionKind.MAKE_LONGER: "Make this {question_type} essay longer by elaborating on the existing points (don't add more arguments):\n\"{content}\"\n" + ESSAY_CONTEXT,
    ActionKind.MAKE_SIMPLER: "Rewrite this {question_type} essay using simpler/more academic language: \n{content}",
    ActionKind.IMPROVE: "Improve/Perfect this essay: \n{content}",
    ActionKind.SUGGESTIONS: "What are the strengths & weaknesses of this essay? Give your suggestions for improvement for the writer: \n{content}",
    ActionKind.SUMMARIZE: "Act as a summarizer and summarize this essay: \n{content}",

    ActionKind.DICTIONARY: "Explain the meaning of {content} and give me an example of how to use it in real life.",
    ActionKind.SYNONYMS: "Give me 5 synonyms of {content}",
    ActionKind.ANTONYMS: "Give me 5 antonyms of {content}",
    ActionKind.OTHER_WAYS_TO_SAY: "Give me 10 other ways to say {content}",
}


def build_prompt(
    topic_type: Union[str, TopicType, None],
    prompt_type: Union[str, ActionKind, None],
    question: str,
    content: str,
) -> str:
    """Build the completion prompt for an action.

    Returns an empty string when ``prompt_type`` is not a known action.
    Question and content are inserted verbatim.
    """
    action = ActionKind.parse(prompt_type)
    if action is None:
        return ""
    persona = persona_for(topic_type)
    # braces inside question/content are not re-interpreted by format()
    return TEMPLATES[action].format(
        actor=persona.actor,
        question_type=persona.question_type,
        question=question,
        content=content,
    )


@dataclass(frozen=True)
class ActionInfo:
    kind: ActionKind
    name: str
    tooltip: str
    group: str
    requires_content: bool = False


# Button groups shown by the editor: actions on the whole essay, on the
# selected text, and on a selected word or phrase.
GENERATE = "generate"
SELECTION = "selection"
VOCABULARY = "vocabulary"

ACTIONS: List[ActionInfo] = [
    ActionInfo(ActionKind.OUTLINE, "Outline", "Write an essay outline", GENERATE),
    ActionInfo(ActionKind.SUPPORT_ARGUMENTS, "Supportive arguments", "generate 3 arguments to support the statement", GENERATE),
    ActionInfo(ActionKind.OPPOSE_ARGUMENTS, "Opposite arguments", "generate 3 arguments to oppose the statement", GENERATE),
    ActionInfo(ActionKind.SAMPLE_ANSWER, "Sample answer", "Write an sample essay", GENERATE),
    ActionInfo(ActionKind.INTRODUCTION, "Introduction", "Write a short introduction paragraph for an essay", GENERATE),
    ActionInfo(ActionKind.CONCLUSION, "Conclusion", "Write a short conclusion paragraph for this half-done essay", GENERATE, requires_content=True),
    ActionInfo(ActionKind.IMPROVE, "Improve", "Improve/Perfect this essay", GENERATE, requires_content=True),
    ActionInfo(
        ActionKind.SUGGESTIONS,
        "Suggestions",
        "What are the strengths & weaknesses of this essay? Give your suggestions for improvement for the writer",
        GENERATE,
        requires_content=True,
    ),
    ActionInfo(ActionKind.ELABORATE, "Elaborate", "Elaborate/Explain the following argument in 3-4 sentences", SELECTION),
    ActionInfo(ActionKind.EXAMPLE, "Example", "Give and explain an example in support of the following argument in 1-2 sentences", SELECTION),
    ActionInfo(ActionKind.FINISH_SENTENCE, "Finish sentence", "Finish this sentence", SELECTION),
    ActionInfo(ActionKind.CORRECT_MISTAKES, "Correct mistakes", "Point out clearly the mistakes in this essay and how to correct them", SELECTION),
    ActionInfo(ActionKind.PARAPHRASE, "Paraphrase", "Paraphrase/Rephrase this sentence/paragraph", SELECTION),
    ActionInfo(ActionKind.MAKE_LONGER, "Make longer", "Make this essay longer by elaborating on the existing points (don't add more arguments)", SELECTION),
    ActionInfo(ActionKind.MAKE_SIMPLER, "Make simpler", "Rewrite this essay using simpler/more academic language", SELECTION),
    ActionInfo(ActionKind.SUMMARIZE, "Summarize", "Summarize this essay", SELECTION),
    ActionInfo(
        ActionKind.DICTIONARY,
        "Dictionary",
        "Explain the meaning of the word and give me an example of how to use it in real life",
        VOCABULARY,
    ),
    ActionInfo(ActionKind.SYNONYMS, "Synonyms", "Give me 5 synonyms", VOCABULARY),
    ActionInfo(ActionKind.ANTONYMS, "Antonyms", "Give me 5 antonyms", VOCABULARY),
    ActionInfo(ActionKind.OTHER_WAYS_TO_SAY, "Other ways to say", "Give me 10 other ways to say this", VOCABULARY),
]
