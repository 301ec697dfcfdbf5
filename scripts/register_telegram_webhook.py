import asyncio

from forwarddate.config import get_settings
from forwarddate.main import register_webhook


async def main():
    print("Registering Telegram webhook...")
    webhook_url = await register_webhook(get_settings())
    print(f"Webhook registered: {webhook_url}")


if __name__ == "__main__":
    asyncio.run(main())
