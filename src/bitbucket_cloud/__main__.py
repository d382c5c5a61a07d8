"""Entry point for running bitbucket-cloud as a module."""

from bitbucket_cloud import main

if __name__ == "__main__":
    main(prog_name="bitbucket-cloud")
