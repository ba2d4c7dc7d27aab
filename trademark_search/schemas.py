"""
trademark_search/schemas.py

Output schemas for persisted search results.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel

from trademark_search.types import AggregatedResults, TrademarkRecord


class TrademarkRecordOutput(BaseModel):
    """
    Persisted shape of one trademark record.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    number: str
    url_logo: str | None = None
    name: str
    trademark_class: str = Field(..., alias="class")
    status: str
    url_details_page: str

    @classmethod
    def from_record(cls, record: TrademarkRecord) -> "TrademarkRecordOutput":
        return cls.model_validate(record.to_output())


class SearchResultsOutput(RootModel[dict[str, TrademarkRecordOutput]]):
    """
    Persisted search results keyed by the server-rendered record index.
    """

    @classmethod
    def from_results(cls, results: AggregatedResults) -> "SearchResultsOutput":
        return cls(
            {index: TrademarkRecordOutput.from_record(record) for index, record in results.records.items()}
        )

    def to_payload(self) -> dict[str, dict[str, str | None]]:
        return self.model_dump(by_alias=True)
