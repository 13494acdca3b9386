"""
Endpoint Resolution

Strategies deciding where a prediction request is sent.
The controller resolves the target at the moment an upload is triggered,
so the model selected at that time is the one used.
"""

from abc import ABC, abstractmethod

from core.constants import ModelVariant


class EndpointResolver(ABC):
    """Maps the current model selection to a request URL"""

    #: Whether the target depends on the selected model
    uses_model: bool = False

    @abstractmethod
    def resolve(self, model: ModelVariant) -> str:
        """Return the URL for a request made with the given model"""


class FixedEndpoint(EndpointResolver):
    """Always the same URL; the model selection is ignored"""

    def __init__(self, url: str):
        if not url:
            raise ValueError("Endpoint URL must not be empty")
        self.url = url

    def resolve(self, model: ModelVariant) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"FixedEndpoint({self.url!r})"


class ModelEndpoint(EndpointResolver):
    """
    URL template with a "{model}" placeholder.

    Example:
        ModelEndpoint("http://127.0.0.1:5000/predict/{model}").resolve(
            ModelVariant.VGG16
        )  # "http://127.0.0.1:5000/predict/vgg16"
    """

    uses_model = True

    def __init__(self, template: str):
        if "{model}" not in template:
            raise ValueError(f"Template has no {{model}} placeholder: {template}")
        self.template = template

    def resolve(self, model: ModelVariant) -> str:
        return self.template.format(model=ModelVariant.from_value(model).value)

    def __repr__(self) -> str:
        return f"ModelEndpoint({self.template!r})"
