"""
Commands - CLI subcommands for the shine client.

- handle:   Run a chat-style command (/recognize, /upvote, /register, ...)
- praise:   Submit addpraise directly
- vote:     Submit addvote
- post:     Submit a post between two accounts
- bind:     Bind a member identity to an account
- unbind:   Remove a member binding
- reset:    Reset the contract's round state
- clear:    Clear all contract tables
- scenario: Submit the demo sequence of praises and votes
"""
