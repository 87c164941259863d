from app.applicant.models import ApplicantMetadata
from app.processor.models import ExtractionMethod, ExtractionResult


class ResultAssembler:
    """Merges applicant metadata and extracted texts into the output record."""

    def assemble(
        self,
        metadata: ApplicantMetadata,
        method: ExtractionMethod,
        ai_text: str | None,
        parser_text: str,
    ) -> ExtractionResult:
        return ExtractionResult(
            full_name=metadata.full_name,
            age=metadata.age,
            extraction_method=method.value,
            ai_text=ai_text,
            parser_text=parser_text.strip(),
        )

    def serialize(self, result: ExtractionResult) -> dict[str, object]:
        """Transform an ExtractionResult into the JSON body sent to the display layer.

        Returns:
            Dict with camelCase keys; ``aiText`` is null when AI was not used.
        """
        return {
            "fullName": result.full_name,
            "age": result.age,
            "extractionMethod": result.extraction_method,
            "aiText": result.ai_text,
            "parserText": result.parser_text,
        }
