import pytest

from errors import UpstreamUnavailable
from name_store import NameHistoryStore
from name_generation import NameGenerator
from trademark_check import TrademarkChecker


class ScriptedModelClient:
    """Model client that replays canned responses, one per call"""

    def __init__(self, responses):
        self.responses = list(responses)
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if not self.responses:
            raise UpstreamUnavailable("no scripted response left")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


async def never_registered(name):
    return False


def numbered_names(names):
    return "\n".join(f"{i}. {name} - Meaning of {name}" for i, name in enumerate(names, start=1))


@pytest.fixture
def store():
    return NameHistoryStore()


@pytest.fixture
def offline_checker():
    return TrademarkChecker(registries={"us": never_registered, "india": never_registered})


@pytest.fixture
def make_generator(store, offline_checker):
    def factory(responses):
        return NameGenerator(
            model_client=ScriptedModelClient(responses),
            store=store,
            trademark_checker=offline_checker,
        )
    return factory
