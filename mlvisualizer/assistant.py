"""
AI Analyst Chat Assistant
=========================

Glue between a training session and a chat model:
- builds the system instruction from a snapshot of the session
- keeps the conversation
- turns a `generate_new_dataset` function call into a new dataset

The chat model itself is reached through a backend object supplied by the
caller (see gemini.GeminiBackend). A backend implements two methods:

    complete(contents, system_instruction, tools) -> dict
        Returns {'text': str} or {'function_calls': [{'name': str, 'args': dict}]}

    generate_json(prompt, schema) -> str
        Returns the raw JSON text of a structured response

A failing backend or a malformed dataset never changes the session; the
user gets an apology message instead.
"""

import json
import logging
from collections import namedtuple

from .datasets import validate_points


logger = logging.getLogger(__name__)


ChatMessage = namedtuple('ChatMessage', ['role', 'content'])
ChatMessage.__doc__ = "One chat turn; role is 'user' or 'model'."

GREETING = ("Hello! I'm your AI Analyst. Ask me about these algorithms, your results, "
            "or ask me to create a new dataset for you!")
DISABLED_MESSAGE = "AI features are disabled because no assistant backend is configured."
GENERATING_MESSAGE = "Sure, I can do that! Generating the new dataset for you..."
GENERATED_MESSAGE = "Here is the new dataset you requested!"
GENERATION_FAILED_MESSAGE = "Sorry, I had trouble generating that dataset. Could you describe it differently?"
ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."

DATASET_NAME_LENGTH = 20

DATASET_TOOL = {
    'name': 'generate_new_dataset',
    'description': ('Generates a 2D dataset for classification based on a user description. '
                    'The coordinates should be normalized between -2 and 2.'),
    'parameters': {
        'type': 'object',
        'properties': {
            'description': {
                'type': 'string',
                'description': ('A creative description of the desired dataset pattern. For example: '
                                '"two intertwined spirals" or "a moon shape and a star shape".'),
            },
        },
        'required': ['description'],
    },
}

DATASET_SCHEMA = {
    'type': 'array',
    'items': {
        'type': 'object',
        'properties': {
            'inputs': {
                'type': 'array',
                'items': {'type': 'number'},
                'description': 'An array containing the [x, y] coordinates of the point.',
            },
            'label': {
                'type': 'integer',
                'description': 'The class label, either 0 or 1.',
            },
        },
        'required': ['inputs', 'label'],
    },
}


def build_system_instruction(context):
    """Analyst persona followed by the current tool state as JSON."""
    return f"""You are an expert AI Analyst integrated into a machine learning visualization tool.
Your goal is to help users understand ML concepts by analyzing the tool's current state and answering their questions.
Use Markdown for formatting your responses to improve readability. For example, use lists for steps, **bold** for important terms, and `code blocks` for parameters or code snippets.
You can also generate new datasets for the user to experiment with by calling the '{DATASET_TOOL['name']}' function.
Be concise, helpful, and educational.

CURRENT TOOL STATE:
{json.dumps(context, indent=2)}
"""


def build_contents(prompt, history):
    """Conversation turns followed by the new prompt, in chat-API form."""
    contents = [{'role': message.role, 'parts': [{'text': message.content}]} for message in history]
    contents.append({'role': 'user', 'parts': [{'text': prompt}]})
    return contents


def build_dataset_prompt(description):
    return f"""Based on the following description, generate a 2D dataset with two classes (label 0 and 1).
The dataset should contain between 100 and 200 points.
The x and y coordinates of the points must be between -2 and 2.
Description: "{description}\""""


def parse_dataset_response(text):
    """
    Parse a generated dataset.

    Args:
        text: JSON array of {"inputs": [x, y], "label": 0 or 1} objects

    Returns:
        List of DataPoint, or None if the text is not a valid dataset
    """
    try:
        payload = json.loads(text.strip())
    except (AttributeError, TypeError, ValueError) as e:
        logger.warning(f"Generated dataset is not valid JSON: {e}")
        return None

    try:
        return validate_points(payload)
    except ValueError as e:
        logger.warning(f"Generated dataset rejected: {e}")
        return None


class Assistant:
    """
    Chat assistant bound to one training session.

    Args:
        backend: Object implementing complete() and generate_json(), or None
            to run with AI features disabled
        session: TrainingSession to describe and, on request, give a new dataset
    """

    def __init__(self, backend, session):
        self.backend = backend
        self.session = session
        self.messages = [ChatMessage('model', GREETING)]

    def _reply(self, content):
        message = ChatMessage('model', content)
        self.messages.append(message)
        return message

    def ask(self, prompt):
        """
        Send a user prompt and collect the assistant's answer.

        Returns:
            List of ChatMessage produced by the assistant for this prompt
        """
        history = list(self.messages)
        self.messages.append(ChatMessage('user', prompt))

        if self.backend is None:
            return [self._reply(DISABLED_MESSAGE)]

        try:
            response = self.backend.complete(
                build_contents(prompt, history),
                system_instruction=build_system_instruction(self.session.context()),
                tools=[DATASET_TOOL],
            )

            function_calls = response.get('function_calls')
            if not function_calls:
                return [self._reply(response.get('text', ''))]

            replies = []
            for call in function_calls:
                if call.get('name') == DATASET_TOOL['name']:
                    replies.append(self._reply(GENERATING_MESSAGE))
                    replies.append(self._reply(self.generate_dataset(call['args']['description'])))
            return replies

        except Exception as e:
            logger.error(f"Assistant backend error: {e}")
            return [self._reply(ERROR_MESSAGE)]

    def generate_dataset(self, description):
        """
        Ask the backend for a dataset and install it in the session.

        Returns:
            The message to show the user
        """
        try:
            text = self.backend.generate_json(build_dataset_prompt(description), DATASET_SCHEMA)
        except Exception as e:
            logger.error(f"Error generating dataset: {e}")
            return GENERATION_FAILED_MESSAGE

        points = parse_dataset_response(text)
        if points is None:
            return GENERATION_FAILED_MESSAGE

        self.session.replace_dataset(points, description[:DATASET_NAME_LENGTH])
        logger.info(f"Installed generated dataset with {len(points)} points")
        return GENERATED_MESSAGE
