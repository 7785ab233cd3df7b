"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler parses the command, calls PartnerService
(found in ``context.bot_data``) and replies with the resulting notice.
No business logic lives here.
"""
