#!/usr/bin/env python3
"""
xbar plugin launcher for wk-status.

Drop (or symlink) this file into the xbar plugins folder. The ``15m`` in
the file name is the refresh interval xbar uses.
"""

# <xbar.title>wk_status</xbar.title>
# <xbar.version>1.0</xbar.version>
# <xbar.author.github>cryptxyz</xbar.author.github>
# <xbar.desc>Shows due reviews and other useful info : )</xbar.desc>
# <xbar.dependencies>python3</xbar.dependencies>
# <xbar.abouturl>https://github.com/cryptxyz/wk_status</xbar.abouturl>

# <xbar.var>boolean(VAR_SHOW_STAGES=true): Show stages</xbar.var>
# <xbar.var>boolean(VAR_SHOW_LEVEL=true): Show level and total items</xbar.var>
# <xbar.var>boolean(VAR_SHOW_USER_INFO=true): Show user info</xbar.var>
# <xbar.var>string(VAR_API_TOKEN="api_token"): Your WaniKani API v2 Token</xbar.var>

from wkstatus.cli import main

if __name__ == "__main__":
    main()
