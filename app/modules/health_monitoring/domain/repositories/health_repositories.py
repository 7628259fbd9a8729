# 📄 File: app/modules/health_monitoring/domain/repositories/health_repositories.py
# 🧭 Purpose (Layman Explanation):
# Defines how the pest and disease catalogues are read.
# 🧪 Purpose (Technical Summary):
# Read-only repository interfaces for pests and plant diseases.
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# HealthMonitoringService, pest and disease repository implementations

from abc import ABC, abstractmethod
from typing import Iterable, List


class PestRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def list_by_common_names(self, names: Iterable[str]) -> List:
        """Pests whose common name equals one of ``names``, ignoring case."""
        pass


class PlantDiseaseRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def list_by_common_names(self, names: Iterable[str]) -> List:
        """Diseases whose common name equals one of ``names``, ignoring case."""
        pass
