# Role: Shared singletons for the API layer. Routes take the service via Depends(get_chat_service),
# which tests replace through app.dependency_overrides.

from chatroom.core.chat_service import ChatService

chat_service = ChatService()


def get_chat_service() -> ChatService:
    return chat_service
