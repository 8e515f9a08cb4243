"""NiceGUI chat widget backed by the exchange controller."""

from nicegui import events, ui

from gemini_chat.models.transcript import ChatMessage, MessageKind, Role, UploadedFile
from gemini_chat.ui.controller import ExchangeController
from gemini_chat.ui.relay_client import RelayClient

EMOJIS = [
    "😀", "😂", "😊", "😍", "🤔", "😎", "😢", "😡",
    "👍", "👎", "👏", "🙏", "🎉", "🔥", "❤️", "✨",
    "🤖", "💡", "✅", "❌", "👀", "🚀", "🌟", "☕",
]

# Shift+Enter inserts a newline.
SEND_KEY_EVENT = "keydown.enter.exact.prevent"

CUSTOM_CSS = """
<style>
    body { background: #eef0ff; min-height: 100vh; }

    .chatbot-popup {
        background: white;
        border-radius: 15px;
        box-shadow: 0 0 128px rgba(0, 0, 0, 0.1), 0 32px 64px -48px rgba(0, 0, 0, 0.5);
        overflow: hidden;
    }

    .chat-header { background: #5350c4; }

    .user-message {
        background: #5350c4;
        color: white;
        border-radius: 13px 13px 3px 13px;
    }

    .bot-message {
        background: #f2f2ff;
        color: #1f2937;
        border-radius: 13px 13px 13px 3px;
    }

    .error-message {
        background: #fdecec;
        color: #b42318;
        border-radius: 13px 13px 13px 3px;
    }

    .image-preview { max-width: 220px; max-height: 220px; border-radius: 10px; }

    .thinking-dot {
        width: 7px; height: 7px;
        background: #6f6bc2;
        border-radius: 50%;
        animation: dotPulse 1.8s ease-in-out infinite;
    }
    .thinking-dot:nth-child(2) { animation-delay: 0.2s; }
    .thinking-dot:nth-child(3) { animation-delay: 0.3s; }

    @keyframes dotPulse {
        0%, 44% { transform: translateY(0); }
        28% { opacity: 0.4; transform: translateY(-4px); }
        44% { opacity: 0.2; }
    }

    .chat-form { border: 1px solid #cccce5; border-radius: 32px; }
    .chat-form:focus-within { outline: 2px solid #5350c4; }
</style>
"""


class NiceGuiChatView:
    """``ChatView`` implementation rendering into NiceGUI elements."""

    def __init__(
        self,
        container: ui.column,
        scroll_area: ui.scroll_area,
        upload: ui.upload,
    ) -> None:
        self._container = container
        self._scroll_area = scroll_area
        self._upload = upload
        self._rows: dict[str, ui.row] = {}
        self.controller: ExchangeController | None = None

    def render(self, message: ChatMessage) -> None:
        with self._container:
            self._rows[message.id] = self._render_row(message)

    def discard(self, message_id: str) -> None:
        row = self._rows.pop(message_id, None)
        if row is not None:
            row.delete()

    def scroll_to_bottom(self) -> None:
        self._scroll_area.scroll_to(percent=1.0)

    def notify_invalid(self, text: str) -> None:
        ui.notify(text, type="warning")

    def reset_file_input(self) -> None:
        self._upload.reset()

    def _render_row(self, message: ChatMessage) -> ui.row:
        is_user = message.role == Role.USER
        align = "justify-end" if is_user else "justify-start"

        with ui.row().classes(f"w-full {align} gap-3 items-end") as row:
            if not is_user:
                ui.icon("smart_toy").classes("text-2xl text-[#5350c4]")
            with ui.column().classes("max-w-[75%] gap-1"):
                if message.kind == MessageKind.THINKING:
                    with ui.element("div").classes("bot-message px-4 py-3"):
                        with ui.row().classes("gap-1 items-center"):
                            for _ in range(3):
                                ui.element("div").classes("thinking-dot")
                elif message.kind == MessageKind.PREVIEW:
                    self._render_preview(message)
                else:
                    self._render_content(message)
                if message.kind != MessageKind.THINKING:
                    ui.label(message.time).classes(
                        f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                    )
        return row

    def _render_preview(self, message: ChatMessage) -> None:
        with ui.element("div").classes("user-message p-2"):
            if message.image is not None:
                ui.image(message.image.data_url).classes("image-preview")
            with ui.row().classes("items-center justify-between gap-2"):
                ui.label(message.filename or "").classes("text-xs")
                ui.button(
                    icon="close",
                    on_click=self._remove_attachment,
                ).props("flat round dense size=sm color=white").tooltip("Remove image")

    def _remove_attachment(self) -> None:
        if self.controller is not None:
            self.controller.remove_attachment()

    def _render_content(self, message: ChatMessage) -> None:
        if message.role == Role.USER:
            bubble = "user-message"
        elif message.kind == MessageKind.ERROR:
            bubble = "error-message"
        else:
            bubble = "bot-message"

        with ui.element("div").classes(f"{bubble} px-4 py-3"):
            if message.image is not None:
                ui.image(message.image.data_url).classes("image-preview")
            if message.text:
                if message.role == Role.BOT and message.kind == MessageKind.TEXT:
                    ui.markdown(message.text).classes("text-sm leading-relaxed")
                else:
                    ui.label(message.text).classes("text-sm whitespace-pre-wrap")


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    input_field: ui.textarea

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = e.content.read()
        controller.stage_attachment(
            UploadedFile(name=e.name, mime_type=e.type or "", content=content)
        )

    async def send_message() -> None:
        text = input_field.value or ""
        input_field.value = ""
        await controller.send_message(text)

    def insert_emoji(emoji: str) -> None:
        input_field.value = (input_field.value or "") + emoji
        input_field.run_method("focus")

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-md mx-auto chatbot-popup gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full chat-header px-5 py-4 items-center gap-3"):
            ui.icon("smart_toy").classes("text-white text-3xl")
            ui.label("Chatbot").classes("text-lg font-semibold text-white")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-5 gap-4")
            with messages_container, ui.row().classes("w-full justify-start gap-3 items-end"):
                ui.icon("smart_toy").classes("text-2xl text-[#5350c4]")
                with ui.element("div").classes("bot-message px-4 py-3"):
                    ui.label("Hey there 👋 How can I help you today?").classes("text-sm")

        upload = (
            ui.upload(
                on_upload=handle_upload,
                on_rejected=lambda: controller.reject_attachment(),
                auto_upload=True,
                max_files=1,
            )
            .props("accept=image/*")
            .classes("hidden")
        )

        # Input
        with ui.row().classes("w-full p-4 gap-2 items-end bg-white no-wrap"):
            with ui.row().classes("flex-grow chat-form px-3 py-1 items-center no-wrap"):
                input_field = (
                    ui.textarea(placeholder="Message...")
                    .props("autogrow borderless dense rows=1")
                    .classes("flex-grow")
                    .on(SEND_KEY_EVENT, send_message)
                )
                with ui.button(icon="sentiment_satisfied").props("flat round dense"):
                    with ui.menu(), ui.grid(columns=8).classes("p-2 gap-1"):
                        for emoji in EMOJIS:
                            ui.button(
                                emoji, on_click=lambda _, em=emoji: insert_emoji(em)
                            ).props("flat dense")
                ui.button(
                    icon="attach_file", on_click=lambda: upload.run_method("pickFiles")
                ).props("flat round dense")
            ui.button(icon="arrow_upward", on_click=send_message).props(
                "round unelevated color=primary"
            )

    view = NiceGuiChatView(messages_container, scroll_area, upload)
    controller = ExchangeController(RelayClient.from_env(), view)
    view.controller = controller

