# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from abc import ABC, abstractmethod

from jobgen_lib.properties.partition import PartitionProfile


class CatalogInterface(ABC):
    """
    Abstract base class for sources of cluster resource information.

    Apart from `listPartitions`, no method is allowed to fail. An empty list
    signals that the information is not available.
    """

    @abstractmethod
    def listPartitions(self) -> list[str]:
        """
        Retrieve the names of all partitions of the cluster.

        Returns:
            list[str]: Sorted list of unique partition names. Never empty.

        Raises:
            JobgenCatalogError: If the partitions could not be obtained
            or there are none.
        """
        pass

    @abstractmethod
    def getPartitionProfile(self, name: str) -> PartitionProfile:
        """
        Retrieve the resource limits of the specified partition.

        Args:
            name (str): Name of the partition.

        Returns:
            PartitionProfile: The limits of the partition.

        Raises:
            JobgenError: If the limits could not be obtained.
        """
        pass

    @abstractmethod
    def listConstraints(self) -> list[str]:
        """
        Retrieve the node features that can be used as constraints.

        Returns:
            list[str]: Available features or an empty list.
        """
        pass

    @abstractmethod
    def listGpuTypes(self) -> list[str]:
        """
        Retrieve the generic resources (GPU types) advertised by the nodes.

        Returns:
            list[str]: Available GPU specifications or an empty list.
        """
        pass

    @abstractmethod
    def listAccounts(self, user: str) -> list[str]:
        """
        Retrieve the accounts the user is associated with.

        Args:
            user (str): Name of the user.

        Returns:
            list[str]: Available accounts or an empty list.
        """
        pass

    @abstractmethod
    def listQosNames(self) -> list[str]:
        """
        Retrieve the names of the available qualities of service.

        Returns:
            list[str]: Available QOS names or an empty list.
        """
        pass

    @abstractmethod
    def listModules(self) -> list[str]:
        """
        Retrieve a preview of the environment modules that can be loaded.

        Returns:
            list[str]: Lines describing the available modules or an empty list.
        """
        pass
