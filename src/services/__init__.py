from services.homework import HomeworkService


def create_homework_service() -> HomeworkService:
    """Factory function to create homework service with all dependencies."""
    from infrastructure.parsers import GridParser, ReflowTranscoder

    return HomeworkService(
        grid_parser=GridParser,
        transcoder=ReflowTranscoder(GridParser),
    )


__all__ = ["HomeworkService", "create_homework_service"]
