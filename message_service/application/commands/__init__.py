"""Write-side commands."""
