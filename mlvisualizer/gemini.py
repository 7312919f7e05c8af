"""
Gemini Backend
==============

Assistant backend on the google-genai SDK:
- complete(): chat with the analyst instruction and the dataset tool
- generate_json(): dataset generation in JSON mode with a response schema

Use backend_from_env() to build one from the API key in the environment.
It returns None when no key is set, which runs the Assistant with AI
features disabled.
"""

import logging
import os

from google import genai
from google.genai import types


logger = logging.getLogger(__name__)


DEFAULT_MODEL = 'gemini-2.5-flash'
API_KEY_VARIABLES = ('API_KEY', 'GEMINI_API_KEY')


class GeminiBackend:
    """
    Assistant backend talking to a Gemini model.

    Args:
        api_key: Gemini API key, used when `client` is None
        model: Model name for both chat and dataset generation
        client: Existing genai.Client (or anything with the same
            `models.generate_content`)
    """

    def __init__(self, api_key=None, model=DEFAULT_MODEL, client=None):
        self.model = model
        self.client = client if client is not None else genai.Client(api_key=api_key)

    def complete(self, contents, system_instruction, tools):
        """
        Send the conversation and return the reply.

        Returns:
            {'function_calls': [{'name', 'args'}]} when the model calls a
            tool, otherwise {'text': str}
        """
        declarations = [
            types.FunctionDeclaration(
                name=tool['name'],
                description=tool['description'],
                parameters_json_schema=tool['parameters'],
            )
            for tool in tools
        ]
        response = self.client.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                tools=[types.Tool(function_declarations=declarations)],
            ),
        )

        if response.function_calls:
            return {'function_calls': [
                {'name': call.name, 'args': dict(call.args or {})}
                for call in response.function_calls
            ]}
        return {'text': response.text or ''}

    def generate_json(self, prompt, schema):
        """Ask for a JSON answer matching `schema` and return its raw text."""
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type='application/json',
                response_json_schema=schema,
            ),
        )
        return response.text

    def __repr__(self):
        return f"GeminiBackend(model={self.model!r})"


def backend_from_env(environ=None, model=DEFAULT_MODEL):
    """
    Build a GeminiBackend from the first API key variable that is set.

    Args:
        environ: Mapping to read instead of os.environ
        model: Model name

    Returns:
        GeminiBackend, or None when no key is configured
    """
    environ = os.environ if environ is None else environ

    for variable in API_KEY_VARIABLES:
        api_key = environ.get(variable)
        if api_key:
            return GeminiBackend(api_key=api_key, model=model)

    logger.warning(f"{API_KEY_VARIABLES[0]} environment variable not set. AI features will be disabled.")
    return None
