from abc import ABC, abstractmethod

from plagcheck.pipeline.models import PipelineContext


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
