"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- repositories: Create, list, update, delete and react to repositories
- system: Host information (whoami)
- health: Health checks and store status
"""
