"""Offer the TAXII 2.0 Status resource."""

from typing import TYPE_CHECKING, Any

from taxii2_connect.client_api.common import validate_response
from taxii2_connect.client_api.tools import with_last_slash
from taxii2_connect.client_api.v20.models import StatusInfo
from taxii2_connect.client_api.v20.resource import BaseResource

if TYPE_CHECKING:
    from taxii2_connect.client_api.common import TaxiiConnect


class Status(BaseResource):
    """Status of a previous request to add objects to a Collection.

    A status changes while the request is pending, it is never cached.
    """

    def __init__(
        self, api_root_path: str, status_id: str, connection: "TaxiiConnect"
    ) -> None:
        """Initialize the Status.

        Args:
            api_root_path (str): The full path to the desired API Root.
            status_id (str): The identifier of the status being requested.
            connection (TaxiiConnect): The shared connection.

        """
        self.api_root_path = with_last_slash(api_root_path)
        self.status_id = status_id
        super().__init__(f"{self.api_root_path}status/{status_id}/", connection)

    async def get(self) -> dict[str, Any]:
        """Retrieve the status information.

        Raises:
            Taxii2InvalidResponseError: If the response is not a TAXII status.

        """
        response = await self.conn.get(self.path)
        return validate_response(response, StatusInfo, self.path)  # type: ignore[no-any-return]
