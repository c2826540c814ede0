from dotenv import load_dotenv
from os import getenv

import pyguild
import asyncio


async def main():
    http_client = pyguild.HTTPClient()
    cache = pyguild.CacheManager(api=http_client)

    await cache.login(getenv("BOT_TOKEN"))

    guild_id = getenv("GUILD_ID")
    data = await http_client.get_member(guild_id, getenv("MEMBER_ID"))
    member = cache.create_member(data, guild_id=guild_id)
    print(member, member.roles, member.joined_at)

    await member.set_nickname("testing 123")
    await member.move_member(getenv("VOICE_CHANNEL_ID"))
    await member.set_nickname()

    await http_client.close()


load_dotenv()
asyncio.run(main())
